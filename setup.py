from setuptools import setup, find_packages

setup(
    name="cellular_models",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"cellular_models": ["configs/*.yaml"]},
    install_requires=["numpy", "PyYAML"],
    extras_require={"test": ["pytest"]},
)
