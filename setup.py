"""
/setup.py

WhatsApp export parsing and chat statistics.
"""

import setuptools

with open("requirements.txt", "r", encoding="utf-8") as file:
    requirements = file.read().splitlines()

setuptools.setup(
    name="whatsapp-stats",
    version="0.0.1",
    description="Reassemble WhatsApp text exports and compute chat statistics",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "chat_stats = whatsapp_stats.commands:main",
        ]
    },
)
