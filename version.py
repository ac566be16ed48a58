
"""
automatically maintains the latest git tag + revision info in a python file

"""

from __future__ import annotations

import importlib.util
import os
import re
import subprocess

MAJOR_MINOR_PATCH_MATCHER = re.compile(r"^\d+\.\d+\.\d+$")
DESCRIBE_MATCHER = re.compile(r"^(?P<version>\d+\.\d+\.\d+)-(?P<commits>\d+)-g?(?P<sha>[0-9a-f]+)$")


def pep440ify(git_describe_version: str) -> str | None:
    """Turn `git describe` output into a PEP 440 version, or None if it has no release tag"""
    if MAJOR_MINOR_PATCH_MATCHER.match(git_describe_version):
        return git_describe_version
    match = DESCRIBE_MATCHER.match(git_describe_version)
    if match:
        # Drop the number of commits, keep the revision as local version label
        return "{}+g{}".format(match.group("version"), match.group("sha"))
    return None


def _read_file_version(version_file: str) -> str | None:
    if not os.path.exists(version_file):
        return None
    spec = importlib.util.spec_from_file_location("version", version_file)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return getattr(module, "__version__", None)


def _git_describe() -> str | None:
    try:
        proc = subprocess.run(
            ["git", "describe", "--tags", "--always"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=os.path.dirname(os.path.realpath(__file__)),
            check=False,
        )
    except OSError:
        return None
    if proc.returncode != 0 or not proc.stdout:
        return None
    return proc.stdout.splitlines()[0].strip().decode("utf-8")


def get_project_version(version_file: str) -> str:
    version_file = os.path.join(os.path.dirname(os.path.realpath(__file__)), version_file)
    file_ver = _read_file_version(version_file)

    git_describe = _git_describe()
    git_ver = pep440ify(git_describe) if git_describe else None
    if git_ver and git_ver != file_ver:
        with open(version_file, "w", encoding="utf-8") as fp:
            fp.write('__version__ = "{}"\n'.format(git_ver))
        return git_ver

    if not file_ver:
        raise Exception("version not available from git or from file %r" % version_file)

    return file_ver


if __name__ == "__main__":
    import sys

    print(get_project_version(sys.argv[1]))
