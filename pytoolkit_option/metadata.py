import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import NotRequired, Required, cast

from typing_extensions import ReadOnly, TypedDict

DISTRIBUTION_NAME = "pytoolkit-option"
PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"


# [project]セクションの型定義
# PEP 621 のキーはハイフンを含むため関数形式で定義する
ProjectInfo = TypedDict(
    "ProjectInfo",
    {
        "name": ReadOnly[Required[str]],
        "version": ReadOnly[NotRequired[str]],
        "description": ReadOnly[NotRequired[str]],
        "readme": ReadOnly[NotRequired[str | dict[str, str]]],
        "requires-python": ReadOnly[NotRequired[str]],
        "license": ReadOnly[NotRequired[str | dict[str, str]]],
        "authors": ReadOnly[NotRequired[list[dict[str, str]]]],
        "keywords": ReadOnly[NotRequired[list[str]]],
        "dependencies": ReadOnly[NotRequired[list[str]]],
        "optional-dependencies": ReadOnly[NotRequired[dict[str, list[str]]]],
    },
)


class PyProjectToml(TypedDict, total=False):
    """pyproject.toml全体の型定義

    https://peps.python.org/pep-0621/
    """

    project: ReadOnly[Required[ProjectInfo]]


def _installed_metadata() -> PyProjectToml:
    """インストール済みディストリビューションからメタデータを組み立てる。"""
    try:
        dist = importlib_metadata.metadata(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        return {"project": {"name": DISTRIBUTION_NAME}}

    return {
        "project": {
            "name": dist["Name"],
            "version": dist["Version"],
            "description": dist.get("Summary", ""),
            "dependencies": dist.get_all("Requires-Dist") or [],
        }
    }


def get_package_metadata(path: Path = PYPROJECT_PATH) -> PyProjectToml:
    """Return the package metadata.

    ソースツリーの pyproject.toml を優先し、存在しない場合は
    インストール済みのメタデータを使用する。
    """
    if not path.is_file():
        return _installed_metadata()
    with path.open("rb") as f:
        return cast(PyProjectToml, tomllib.load(f))


METADATA = get_package_metadata()
NAME = METADATA["project"]["name"]
VERSION = METADATA["project"].get("version", "unknown")
