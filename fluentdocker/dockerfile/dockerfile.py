import typing as t

from fluentdocker.utils.settings import Settings
from .instructions import InstructionSequence


class Dockerfile(InstructionSequence):
    """
    Top level instruction sequence that renders a complete Dockerfile.

    The rendered file starts with a comment that marks it as generated, followed by a blank line.
    """

    header_comment = "# Do not edit this file directly. It is generated by FluentDocker."  # type: str
    """ First line of every rendered Dockerfile with header """

    def __init__(self, header: t.Optional[bool] = None):
        """
        Creates an empty Dockerfile.

        :param header: prepend the generated file comment? Defaults to the ``dockerfile/header`` setting.
        """
        super().__init__()
        self.header = Settings().default(header, "dockerfile/header")  # type: bool

    def render(self) -> str:
        body = super().render()
        if self.header:
            return "{}\n\n{}".format(self.header_comment, body)
        return body
