from setuptools import setup, find_packages

setup(
    name="nsl-validation-lib",
    version="0.1.0",
    description="Rule-based linter for NSL entity, process, tenant and local objective notation",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        'nsl_validation': ['local-config.yaml'],
        'nsl_validation.logic': ['business-config.yaml', 'samples.yaml'],
    },
    include_package_data=True,
    install_requires=[
        'pyyaml>=6.0',
        'jsonschema>=4.17.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.9',
)
