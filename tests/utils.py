import os
import typing as t


def fake_docker(dir: str, ret_code: int = 0, out: str = "", err: str = "", marker: t.Optional[str] = None) -> str:
    """
    Creates a shell script that stands in for the docker executable.

    The script prints its arguments and the passed output, touches the marker file if given
    and exits with the passed return code.

    :param dir: directory to create the script in
    :param ret_code: exit code of the script
    :param out: additional text printed on stdout
    :param err: text printed on stderr
    :param marker: file that is created when the script runs
    :return: path of the script
    """
    script = os.path.join(dir, "docker")
    lines = ["#!/bin/sh", 'echo "args: $*"']
    if out:
        lines.append("echo '{}'".format(out))
    if err:
        lines.append("echo '{}' >&2".format(err))
    if marker:
        lines.append("touch '{}'".format(marker))
    lines.append("exit {}".format(ret_code))
    with open(script, "w") as f:
        f.write("\n".join(lines) + "\n")
    os.chmod(script, 0o755)
    return script
