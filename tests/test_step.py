from fluentdocker.dockerfile.instructions import InstructionSequence
from fluentdocker.dockerfile.step import Step


def test_step():
    step = Step("demo", "Example step").run("echo hello world")
    assert step.name == "demo"
    assert step.description == "Example step"
    assert step.lines == ["RUN echo hello world"]
    assert step.render() == "# demo\n# Example step\nRUN echo hello world"


def test_step_chaining_returns_step():
    step = Step("demo", "Example step")
    assert step.from_("alpine") is step
    assert step.cmd(["sh"]) is step
    assert step.lines == ["FROM alpine", 'CMD ["sh"]']


def test_step_name_and_description_are_verbatim():
    step = Step("  Demo ", "")
    assert step.render() == "#   Demo \n# \n"


def test_steps_in_sequence():
    sequence = InstructionSequence() \
        .from_("node:18-alpine") \
        .with_step(Step("demo", "Example step").run("echo hello world")) \
        .with_step(Step("demo2", "Example step 2").run("echo hello world 2"))
    assert sequence.render() == """FROM node:18-alpine

# demo
# Example step
RUN echo hello world

# demo2
# Example step 2
RUN echo hello world 2"""


def test_nested_steps():
    inner = Step("inner", "Inner step").run("make")
    outer = Step("outer", "Outer step").workdir("/src").with_step(inner)
    assert outer.render() == "# outer\n# Outer step\nWORKDIR /src\n\n# inner\n# Inner step\nRUN make"


def test_steps_do_not_share_lines():
    first = Step("a", "A").run("a")
    second = Step("b", "B").run("b")
    assert first.lines == ["RUN a"]
    assert second.lines == ["RUN b"]
