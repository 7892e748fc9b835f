"""Environment file parsing."""


def parse_env_text(text: str) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines from an environment file.

    Blank lines, ``#`` comments, and lines without a key are skipped. A value
    wrapped in matching single or double quotes is unwrapped. Later keys win.
    """
    variables: dict[str, str] = {}

    for raw_line in text.replace("\r\n", "\n").split("\n"):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue

        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]

        variables[key] = value

    return variables


def merge_environment(
    workspace_env: dict[str, str], collection_env: dict[str, str]
) -> dict[str, str]:
    """Merge workspace and collection variables; collection values win."""
    return {**workspace_env, **collection_env}
