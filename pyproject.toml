[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thucourses"
version = "0.1.0"
description = "Scrape department course listings from the Tunghai University course site and save them as CSV."
requires-python = ">=3.10"
keywords = ["crawler", "courses", "scraper", "csv", "timetable"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Chinese (Traditional)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]
dependencies = [
    "requests",
    "beautifulsoup4",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
thucourses = "thucourses.crawler:main"

[tool.hatch.build.targets.wheel]
packages = ["thucourses"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
