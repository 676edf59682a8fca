[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kontour"
version = "0.1.0"
description = "Fetch and filter Kubernetes pods, services, statefulsets, secrets and volume claims"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "k8s", "pods", "services", "statefulsets", "secrets", "filtering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kontour"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
