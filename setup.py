from setuptools import find_packages, setup

setup(
    name="honeybadger-api",
    version="0.1.0",
    license="Apache License 2.0",

    author="Honeybadger API client maintainers",
    python_requires=">=3.12",
    description="Client for the Honeybadger error tracking REST API (v2): "
                "accounts, projects, faults, check-ins, uptime and more.",

    packages=find_packages(exclude=("tests", "tests.*")),

    install_requires=[
        "httpx>=0.27,<1.0",
        "pydantic>=2.7,<3.0",
        "pydantic-settings>=2.3,<3.0",
        "structlog>=24.1",
        "prometheus-client>=0.20",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },

    test_suite="tests",

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.12',
    ],
)
