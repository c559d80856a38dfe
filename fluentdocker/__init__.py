"""
Fluent builder for Dockerfiles.

    >>> Dockerfile().from_("node:18-alpine").run("apk update").expose(8080).build(".", "node-app")
"""

from fluentdocker.build.builder import BuildError, BuildResult, DockerBuilder
from fluentdocker.dockerfile.dockerfile import Dockerfile
from fluentdocker.dockerfile.instructions import ExecForm, InstructionSequence, ShellForm
from fluentdocker.dockerfile.step import Step

__all__ = ["BuildError", "BuildResult", "DockerBuilder", "Dockerfile", "ExecForm", "InstructionSequence",
           "ShellForm", "Step"]
