# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="repotree",
    version="1.0.0",
    description="Fetch the directory tree of a GitHub repository and render it as indented text",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["repotree*"]),
    package_data={
        "repotree.interface.locales": ["*.json"],
    },
    install_requires=[
        "requests",
        "fastapi",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        'console_scripts': [
            'repotree=repotree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
