[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "delivery"
version = "0.1.0"
description = "Courier dispatch domain model with a small health-check HTTP service"
requires-python = ">=3.10"
keywords = ["delivery", "courier", "dispatch", "orders", "logistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]
dependencies = [
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
delivery = "delivery.app:main"

[tool.hatch.build.targets.wheel]
packages = ["delivery"]

[tool.pytest.ini_options]
addopts = "-ra"
