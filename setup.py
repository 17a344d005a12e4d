from setuptools import find_packages, setup


setup(
    name="fileinclude",
    version="1.0.0",
    description="Resolve @@include('path') directives into flattened output files",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["fileinclude = fileinclude.cli:main"]},
)
