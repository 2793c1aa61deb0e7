[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ossim"
version = "0.1.0"
description = "Small simulations of classic operating-system algorithms: CPU scheduling, deadlock avoidance, paging, disk scheduling, synchronisation and IPC."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "round robin",
    "srtf",
    "bankers algorithm",
    "page replacement",
    "disk scheduling",
    "producer consumer",
    "readers writers",
    "ipc",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ossim-schedule = "ossim.scheduling:main"
ossim-bankers = "ossim.bankers:main"
ossim-paging = "ossim.paging:main"
ossim-disk = "ossim.disk:main"
ossim-processes = "ossim.processes:main"
ossim-sync = "ossim.sync:main"
ossim-ipc = "ossim.ipc:main"

[tool.hatch.build.targets.wheel]
packages = ["ossim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
