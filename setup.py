from setuptools import find_packages, setup

setup(
    name="iptvdesk",
    version="0.1.0",
    description="IPTV seller desk: playlist URL rewriting and credential tools",
    packages=find_packages(exclude=("tests", "tests.*", "venv")),
    python_requires=">=3.11",
    install_requires=[
        "prompt-toolkit",
        "pyperclip",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "dev": [
            "black",
            "pytest",
            "isort",
        ]
    },
    entry_points={
        "console_scripts": [
            "iptvdesk=iptvdesk.main:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
)
