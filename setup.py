# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="qmlbundle",
    version="0.1.0",
    description="Stage the Qt QML modules a project depends on into a distribution directory",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["qmlbundle", "qmlbundle.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'qmlbundle=qmlbundle.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
