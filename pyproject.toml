[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "issuebot"
version = "0.1.0"
description = "Issue and pull request triage helpers: label permissions, summary notes, webhook signatures and comment and chat message formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["triage", "issues", "pull-requests", "labels", "webhook", "zulip"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Bug Tracking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["issuebot"]

[tool.pytest.ini_options]
addopts = "-ra"
