from __future__ import annotations

from typer.testing import CliRunner

from pathalg import cli
from pathalg.config import PathContext

HOME = "/home/user"
WORKING_DIRECTORY = "/work/project"

# Mixed-convention corpus used by the property checks.
SAMPLE_PATHS = [
    "",
    ".",
    "..",
    "./",
    "../",
    "/",
    "\\",
    "////",
    "foo",
    "foo/",
    "foo/bar",
    "foo\\bar\\",
    "foo/./bar//baz",
    "foo/../bar",
    "foo/../../bar/",
    "../foo/..",
    "../../a/b/../c",
    "a/b/c/../../..",
    "/foo/../bar/../baz",
    "/../..",
    "/foo///.",
    "/foo/./",
    "/a\\b/c",
    "\\a\\b\\..\\c",
    "//foo//./bar",
    "//server/foo/..//bar",
    "\\\\server\\share\\dir",
    "\\\\server",
    "//..",
    "//server/..",
    "\\\\server\\..\\",
    "//.",
    "C:",
    "C:\\",
    "C:/",
    "C:\\Windows",
    "C:\\Windows\\System32\\..\\",
    "C:\\..\\..\\bar",
    "C:..\\bar",
    "C:notepad.exe",
    "C:a/",
    "C:a\\b\\",
    "d:/data/./x",
    "~",
    "~/",
    "~/foo/../bar/",
    "~/../bar",
    "~\\docs\\file.txt",
    "~foo/bar",
    "file.tar.gz",
    ".hidden",
    "a/.hidden/b",
]


def make_context(*, separator: str | None = None) -> PathContext:
    """Build a context that does not depend on the machine running the tests."""

    return PathContext(home=HOME, working_directory=WORKING_DIRECTORY, separator=separator)


def invoke(*args: str):
    """Run the CLI with a fixed home and working directory in the environment."""

    runner = CliRunner()
    env = {"PATHALG_HOME": HOME, "PATHALG_CWD": WORKING_DIRECTORY}
    return runner.invoke(cli.app, list(args), env=env)
