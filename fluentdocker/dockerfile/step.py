import typing as t

from .instructions import Instructions, InstructionSequence


class Step(Instructions):
    """
    A named and described group of instructions that is rendered as a labeled block.

    The step wraps its own :class:`InstructionSequence` and only changes how it is rendered.
    """

    def __init__(self, name: str, description: str):
        """
        Creates an empty step.

        :param name: name of the step, rendered as the first comment line
        :param description: description of the step, rendered as the second comment line
        """
        self.name = name  # type: str
        self.description = description  # type: str
        self.sequence = InstructionSequence()  # type: InstructionSequence
        """ Instructions of this step """

    @property
    def lines(self) -> t.List[str]:
        return self.sequence.lines

    def _append(self, line: str) -> "Step":
        self.sequence._append(line)
        return self

    def render(self) -> str:
        return "# {}\n# {}\n{}".format(self.name, self.description, self.sequence.render())
