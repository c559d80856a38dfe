"""
Creates Dockerfiles from YAML build descriptions.

A build description has the following format:

.. code-block:: yaml

    header: true              # optional, defaults to the dockerfile/header setting
    instructions:
      - from: node:18-alpine
      - run: apk update
      - copy: {src: ., dest: /app}
      - cmd: [npx, --yes, serve]
      - step:
          name: deps
          description: Install the dependencies
          instructions:
            - run: npm ci

Mappings are passed as keyword arguments, every other value as the single positional argument.
"""
import typing as t

import yaml

from fluentdocker.utils.util import join_strs
from .dockerfile import Dockerfile
from .instructions import Instructions
from .step import Step


class DescriptionError(ValueError):
    """ Error raised if a build description is malformed """
    pass


instruction_methods = {
    "from": "from_",
    "run": "run",
    "copy": "copy",
    "add": "add",
    "env": "env",
    "workdir": "workdir",
    "cmd": "cmd",
    "entrypoint": "entrypoint",
    "volume": "volume",
    "label": "label",
    "maintainer": "maintainer",
    "expose": "expose",
    "user": "user",
    "arg": "arg",
    "on_build": "on_build",
    "stop_signal": "stop_signal",
    "healthcheck": "healthcheck",
    "shell": "shell",
    "comment": "comment"
}  # type: t.Dict[str, str]
""" Instruction names usable in build descriptions and their methods """


def load_file(file: str) -> Dockerfile:
    """
    Loads the build description from the passed YAML file.

    :param file: name of the YAML file
    :raises: DescriptionError if the file can't be parsed or is malformed
    """
    try:
        with open(file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise DescriptionError("Can't parse {}: {}".format(file, err))
    return load_dockerfile(data)


def load_dockerfile(data: t.Dict[str, t.Any]) -> Dockerfile:
    """
    Creates a Dockerfile from the passed build description.

    :param data: parsed build description
    :raises: DescriptionError if the description is malformed
    """
    if not isinstance(data, dict):
        raise DescriptionError("Build description has to be a mapping")
    unknown = sorted(set(data.keys()) - {"header", "instructions"})
    if unknown:
        raise DescriptionError("Unknown keys in build description: {}".format(join_strs(unknown)))
    header = data.get("header")
    if header is not None and not isinstance(header, bool):
        raise DescriptionError("header has to be a boolean, got {!r}".format(header))
    dockerfile = Dockerfile(header=header)
    _add_instructions(dockerfile, data.get("instructions", []))
    return dockerfile


def _load_step(data: t.Any) -> Step:
    if not isinstance(data, dict) or "name" not in data or "description" not in data:
        raise DescriptionError("A step needs a name and a description, got {!r}".format(data))
    unknown = sorted(set(data.keys()) - {"name", "description", "instructions"})
    if unknown:
        raise DescriptionError("Unknown keys in step {!r}: {}".format(data["name"], join_strs(unknown)))
    step = Step(str(data["name"]), str(data["description"]))
    _add_instructions(step, data.get("instructions", []))
    return step


def _add_instructions(sequence: Instructions, entries: t.Any):
    if not isinstance(entries, list):
        raise DescriptionError("instructions have to be a list, got {!r}".format(entries))
    for entry in entries:
        if not isinstance(entry, dict) or len(entry) != 1:
            raise DescriptionError("Each instruction has to be a mapping with a single key, got {!r}".format(entry))
        name, args = next(iter(entry.items()))
        if name == "step":
            sequence.with_step(_load_step(args))
            continue
        if name not in instruction_methods:
            raise DescriptionError("Unknown instruction {!r}, expected {}"
                                   .format(name, join_strs(sorted(instruction_methods) + ["step"], "or")))
        method = getattr(sequence, instruction_methods[name])
        try:
            if isinstance(args, dict):
                method(**args)
            else:
                method(args)
        except TypeError as err:
            raise DescriptionError("Invalid arguments for {}: {}".format(name, err))
