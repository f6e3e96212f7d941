from setuptools import setup, find_packages

__version__ = "1.0.0"

requirements = [
    "dependency-injector>=4.0,<5.0",
    "lxml",
    "cryptography",
    "pydantic>=2.0,<3.0",
    "python-dateutil",
]

setup(
    name="saml-metadata",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_dir={"saml_metadata": "saml_metadata"},
    install_requires=requirements,
    extras_require={
        "dev": [
            "black",
            "pylint",
            "bandit",
            "mypy",
            "autoflake",
            "coverage",
            "coverage-badge",
            "freezegun",
            "pytest",
            "pytest-mock",
            "types-python-dateutil",
            "lxml-stubs",
        ],
        "test": [
            "freezegun",
            "pytest",
            "pytest-mock",
        ],
    },
)
