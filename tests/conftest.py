# The test files are SmartPy scenario scripts: `sp.add_test` runs each
# scenario at import time and returns None, so pytest finds no test
# functions in them. Collect each `*_tests.py` as one item that runs the
# script the way the README does (`python tests/<name>_tests.py`).
import subprocess
import sys

import pytest


def pytest_collect_file(parent, file_path):
    if file_path.suffix == ".py" and file_path.name.endswith("_tests.py"):
        return SmartPyScenarioFile.from_parent(parent, path=file_path)


class SmartPyScenarioFile(pytest.File):
    def collect(self):
        yield SmartPyScenarioItem.from_parent(self, name=self.path.stem)


class SmartPyScenarioItem(pytest.Item):
    def runtest(self):
        result = subprocess.run(
            [sys.executable, str(self.path)],
            cwd=self.config.rootpath,
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            raise ScenarioFailure(result.stdout + result.stderr)

    def repr_failure(self, excinfo):
        if isinstance(excinfo.value, ScenarioFailure):
            return str(excinfo.value)
        return super().repr_failure(excinfo)

    def reportinfo(self):
        return self.path, None, self.name


class ScenarioFailure(Exception):
    pass
