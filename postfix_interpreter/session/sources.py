"""Read expression and symbol files, either plain or packed in an archive."""
from pathlib import Path
import tarfile
import tempfile
from typing import List
import zipfile

import py7zr

from postfix_interpreter.common.logger import logger


TEXT_MEMBER_SUFFIX = ".txt"


def read_text_source(path: Path) -> str:
    """
    Return the text of an expression or symbol file.

    :param Path path: Plain text file, or a .zip, .tar.xz or .7z archive holding one

    :return: File content
    :rtype: str
    :raises ValueError: If the archive format is unsupported or holds no text member
    """
    if path.suffix in (".zip", ".7z", ".xz"):
        return extract_archive(path)
    return path.read_text(encoding="utf-8")


def _first_text_member(names: List[str], archive_path: Path) -> str:
    members = [name for name in names if name.endswith(TEXT_MEMBER_SUFFIX)]
    if not members:
        raise ValueError(f"📦❌ {archive_path} holds no {TEXT_MEMBER_SUFFIX} member to read expressions or symbols from")
    if len(members) > 1:
        logger.debug(f"📦 {archive_path}: using {members[0]}, ignoring {len(members) - 1} other text member(s)")
    return members[0]


def _read_zip(archive_path: Path) -> str:
    with zipfile.ZipFile(archive_path) as zf:
        member = _first_text_member(zf.namelist(), archive_path)
        return zf.read(member).decode("utf-8")


def _read_tar_xz(archive_path: Path) -> str:
    with tarfile.open(archive_path, "r:xz") as tf:
        files = {info.name: info for info in tf.getmembers() if info.isfile()}
        member = _first_text_member(list(files), archive_path)
        return tf.extractfile(files[member]).read().decode("utf-8")


def _read_7z(archive_path: Path) -> str:
    with py7zr.SevenZipFile(archive_path, mode="r") as archive:
        member = _first_text_member(archive.getnames(), archive_path)
        # py7zr only extracts to disk
        with tempfile.TemporaryDirectory() as workdir:
            archive.extract(path=workdir, targets=[member])
            return (Path(workdir) / member).read_text(encoding="utf-8")


def extract_archive(archive_path: Path) -> str:
    """
    Read the first .txt member of an archive.

    Zip and tar.xz members are read in memory; 7z members go through a
    temporary directory that is removed before returning.

    :param Path archive_path: Path to a .zip, .tar.xz or .7z archive

    :return: Decoded content of the member
    :rtype: str
    :raises ValueError: If the format is unsupported or no .txt member exists
    """
    if archive_path.suffix == ".zip":
        reader = _read_zip
    elif archive_path.suffixes[-2:] == [".tar", ".xz"]:
        reader = _read_tar_xz
    elif archive_path.suffix == ".7z":
        reader = _read_7z
    else:
        raise ValueError(f"📦❌ Cannot read {archive_path}: expected a .zip, .tar.xz or .7z archive")

    logger.debug(f"📦 Reading {archive_path} with {reader.__name__}")
    return reader(archive_path)
