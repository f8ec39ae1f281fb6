import os


class PEngineUtils:

    projectDir: str = None
    metadata: dict = {}

    def setup(projectDir: str, metadata: dict = None):
        PEngineUtils.projectDir = projectDir
        PEngineUtils.metadata = metadata if metadata is not None else {}

    def projectVersion() -> str:
        return PEngineUtils.metadata.get("version")

    def subprojectPyPath(subProjectName: str):
        return os.path.join(
            PEngineUtils.projectDir,
            "subprojects",
            subProjectName,
            "src",
            "python",
            subProjectName,
        )
