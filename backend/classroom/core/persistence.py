"""
Flat-file user persistence.

One user per line: ``id|username|password|roleCode`` where roleCode is
0 (Student), 1 (Teacher) or 2 (Admin). Lines that do not parse are skipped.
Chat, syllabus and assignment state is not persisted.
"""

import logging
from pathlib import Path

from classroom.core.errors import IOUnavailable
from classroom.core.users import Role, UserDirectory, UserRecord

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"
_ROLE_CODES = {int(role) for role in Role}


def format_record(record: UserRecord) -> str:
    return FIELD_SEPARATOR.join(
        (str(record.id), record.username, record.password, str(record.role_code))
    )


def parse_record(line: str) -> UserRecord | None:
    """Parse one line, or return None if it is malformed."""
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(parts) != 4:
        return None
    raw_id, username, password, raw_role = parts
    if not username or not password:
        return None
    try:
        user_id = int(raw_id)
        role_code = int(raw_role)
    except ValueError:
        return None
    if role_code not in _ROLE_CODES:
        return None
    return UserRecord(user_id, username, password, role_code)


def save_users(directory: UserDirectory, path: str | Path) -> int:
    """
    Write every user in ``directory`` to ``path``.

    Returns:
        Number of records written.

    Raises:
        IOUnavailable: if the file cannot be opened for writing.
    """
    records = directory.export_records()
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for record in records:
                f.write(format_record(record) + "\n")
    except OSError as e:
        logger.warning("Unable to open %s for users save: %s", path, e)
        raise IOUnavailable(f"Unable to open '{path}' for writing") from e
    return len(records)


def load_users(directory: UserDirectory, path: str | Path) -> int:
    """
    Read users from ``path`` into ``directory``, keeping their ids.

    Usernames already present are skipped.

    Returns:
        Number of users inserted.

    Raises:
        IOUnavailable: if the file cannot be opened for reading.
    """
    try:
        with open(path, "rb") as f:
            raw_lines = f.readlines()
    except OSError as e:
        logger.warning("Unable to open %s for users load: %s", path, e)
        raise IOUnavailable(f"Unable to open '{path}' for reading") from e

    records = []
    for lineno, raw in enumerate(raw_lines, start=1):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Skipping undecodable user record at %s:%d", path, lineno)
            continue
        record = parse_record(line)
        if record is None:
            if line.strip():
                logger.debug("Skipping malformed user record at %s:%d", path, lineno)
            continue
        records.append(record)
    return directory.load_records(records)
