# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="maketree",
    version="0.1.0",
    description="Create directories and files from a `tree` listing, and print directories as listings",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["maketree", "maketree.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pyperclip",  # Clipboard input/output for --from-clipboard and --to-clipboard
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'maketree=maketree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
