[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ossim"
version = "0.1.0"
description = "Small simulations of classic operating-system algorithms: Banker's algorithm, contiguous file allocation, disk scheduling and scatter/reduce over simulated workers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "bankers algorithm",
    "deadlock avoidance",
    "disk scheduling",
    "file allocation",
    "simulation",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ossim-bankers = "ossim.bankers:main"
ossim-alloc = "ossim.allocation:main"
ossim-disk = "ossim.disk:main"
ossim-cluster = "ossim.cluster:main"

[tool.hatch.build.targets.wheel]
packages = ["ossim"]

[tool.pytest.ini_options]
addopts = "-ra"
