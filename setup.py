# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="orgchart",
    version="0.1.0",
    description="Organizational charts as a closed recursive sum type, with size and depth folds",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["orgchart", "orgchart.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'orgchart-demo=orgchart.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
