[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jadwal_dokter"
version = "1.0.0"
description = "Monthly doctor shift scheduling from a semicolon-separated roster file"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "roster", "shifts", "doctors", "hospital"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jadwal-dokter = "jadwal_dokter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jadwal_dokter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
