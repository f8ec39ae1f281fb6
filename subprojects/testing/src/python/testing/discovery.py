import os
from unittest import TestLoader, TestSuite


def buildSuite(testspace: str, loader: TestLoader = None) -> TestSuite:
    """
    Collects the tests of every area found in the testspace directory.
    Areas are plain directories, each one is discovered on its own
    """
    loader = loader if loader is not None else TestLoader()
    suite = TestSuite()

    for area in sorted(os.listdir(testspace)):
        areaDir = os.path.join(testspace, area)
        if os.path.isdir(areaDir):
            suite.addTests(loader.discover(areaDir, top_level_dir=areaDir))

    return suite
