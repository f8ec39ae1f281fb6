import json
import os
import re
import sys
from setuptools import setup, find_namespace_packages

projectDir = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(projectDir, "project.json"), "r", encoding="utf-8") as inputStream:
    version: str = json.load(inputStream).get("version", "")

versionPattern = re.compile(
    r"v(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)(-(?P<status>[a-zA-Z0-9]+))?$"
)
versionMatch = versionPattern.match(version)

if versionMatch is None:
    print(
        "Invalid version format in project.json: \x1b[1;31m{}\x1b[0m".format(version)
    )
    sys.exit(1)

usedVersion = "{}.{}.{}".format(
    versionMatch.group("major"),
    versionMatch.group("minor"),
    versionMatch.group("patch"),
)

if versionMatch.group("status") is not None:
    usedVersion += ".dev0"


setup(
    name="earleychart",
    version=usedVersion,
    description="Earley chart recognizer for context-free grammars",
    packages=find_namespace_packages(
        "subprojects/earleychart/src/python", include=["earleychart*"]
    ),
    package_dir={"": "subprojects/earleychart/src/python"},
    python_requires=">=3.9",
)
