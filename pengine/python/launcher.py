import os
import sys
import json
import importlib

# Handling given arguments
if len(sys.argv) < 3:
    print("Usage: launcher.py <project directory> <launch configuration> [args...]")
    sys.exit(1)

projectDir: str = os.path.abspath(sys.argv[1])
launchConfigName: str = sys.argv[2]
sys.argv = [sys.argv[0]] + sys.argv[3:]

# Loading project metadata
with open(
    os.path.join(projectDir, "project.json"), "r", encoding="utf-8"
) as inputStream:
    projectMetadata: dict = json.load(inputStream)

launchConfigurations: dict = projectMetadata.get("launch-configurations", {})

if launchConfigName not in launchConfigurations:
    print(
        "No launch configuration found with name \x1b[1;31m{}\x1b[0m, known ones are {}".format(
            launchConfigName, ", ".join(sorted(launchConfigurations))
        )
    )
    sys.exit(1)

launchConfig: dict = launchConfigurations[launchConfigName]

# Adding sub projects to path
for subProject in sorted(os.listdir(os.path.join(projectDir, "subprojects"))):
    sys.path.append(
        os.path.join(projectDir, "subprojects", subProject, "src", "python")
    )

sys.path.append(os.path.join(projectDir, "pengine", "python", "engine-libs"))

# Launch configurations may pin a log level, the environment still wins
if "log-level" in launchConfig:
    os.environ.setdefault("LOG_LEVEL", launchConfig["log-level"])

# Preparing runtime utils
from pengine_utils import PEngineUtils

PEngineUtils.setup(projectDir, projectMetadata)

from earleychart.utils import setupLogger

setupLogger()

# Importing the target module
importlib.import_module(launchConfig["target"])
