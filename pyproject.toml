[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codesort"
version = "1.0.0"
description = "Sort blocks of code (enum variants, struct fields, match arms, functions) while keeping comments, annotations and spacing attached."
requires-python = ">=3.10"
dependencies = []
keywords = ["sort", "code", "formatting", "rust", "java", "javascript", "editor"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
    "Topic :: Text Editors",
    "Topic :: Utilities",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
codesort-explain = "codesort.explain:main"
codesort-list-invalid = "codesort.list_invalid:main"
codesort-sort-enums = "codesort.sort_enums:main"

[tool.hatch.build.targets.wheel]
packages = ["codesort"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
