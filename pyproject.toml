[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fitness_assistant"
version = "0.1.0"
description = "Health metric calculations: biomarker classification, supplement adherence, heart rate zones, recovery scores, health probes and user data deletion."
requires-python = ">=3.10"
dependencies = []
keywords = ["fitness", "health", "biomarkers", "heart rate", "hrv", "recovery"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["fitness_assistant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.mypy]
python_version = "3.10"
strict = true

[tool.ruff]
line-length = 100
target-version = "py310"
