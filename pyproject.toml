[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cultivo"
version = "0.1.0"
description = "Gestão de terrenos agrícolas: análise de solo, sugestão de plantas, plantações e moderação de denúncias"
requires-python = ">=3.10"
dependencies = []
keywords = ["agricultura", "solo", "terrenos", "plantas", "plantacao", "moderacao"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cultivo = "cultivo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cultivo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
