# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="detect-file",
    version="1.0.0",
    description="Resolve a filesystem path if it exists, with optional case-insensitive matching",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["detect_file", "detect_file.*"]),
    package_data={
        "detect_file.interface.locales": ["*.json"],
    },
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'detect-file=detect_file.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
