# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="printree",
    version="1.0.0",
    description="Render arbitrary trees (ASTs, directories, JSON-like data) as ASCII-art text",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["printree", "printree.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'printree=printree.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
