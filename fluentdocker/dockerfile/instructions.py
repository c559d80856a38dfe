"""
The instruction model: each append method formats exactly one Dockerfile line.
"""
import typing as t

from fluentdocker.build.builder import DockerBuilder


class ShellForm(t.NamedTuple):
    """ Command in shell form, e.g. ``CMD npm start`` """

    command: str

    def format(self) -> str:
        return self.command


class ExecForm(t.NamedTuple):
    """ Command in exec (JSON array) form, e.g. ``CMD ["npm", "start"]`` """

    args: t.List[str]

    def format(self) -> str:
        return '["{}"]'.format('", "'.join(self.args))


Command = t.Union[ShellForm, ExecForm]
""" Argument of the instructions that support a shell and an exec form """


def as_command(value: t.Union[Command, str, t.Sequence[str]]) -> Command:
    """
    Converts the passed value into a tagged command.

    :param value: tagged command, plain string (shell form) or sequence of strings (exec form)
    :return: tagged command
    """
    if isinstance(value, (ShellForm, ExecForm)):
        return value
    if isinstance(value, str):
        return ShellForm(value)
    return ExecForm(list(value))


class Instructions:
    """
    All Dockerfile instructions, each one appends a line via ``_append`` and returns the receiver.

    Implementing classes have to provide ``_append`` and ``render``.
    """

    def _append(self, line: str):
        raise NotImplementedError()

    def render(self) -> str:
        """ Returns the Dockerfile text for the accumulated instructions """
        raise NotImplementedError()

    def __str__(self) -> str:
        return self.render()

    def from_(self, image: str):
        """
        FROM sets the base image for subsequent instructions.

        :param image: image to use
        """
        return self._append("FROM {}".format(image))

    def run(self, command: str):
        """
        RUN <command> in shell form.

        :param command: command to run
        """
        return self._append("RUN {}".format(command))

    def copy(self, src: str, dest: str):
        """
        COPY <src> <dest>, the source path has to be inside the build context.

        :param src: source path
        :param dest: destination path inside the image
        """
        return self._append("COPY {} {}".format(src, dest))

    def add(self, src: str, dest: str):
        """
        ADD <src> <dest>, like COPY but also accepts remote URLs and archives.

        :param src: source path or URL
        :param dest: destination path inside the image
        """
        return self._append("ADD {} {}".format(src, dest))

    def env(self, key: str, value: str):
        """
        ENV <key>=<value>

        :param key: environment variable name
        :param value: environment variable value
        """
        return self._append("ENV {}={}".format(key, value))

    def workdir(self, dir: str):
        """
        WORKDIR <dir> sets the working directory for the following instructions.

        :param dir: working directory
        """
        return self._append("WORKDIR {}".format(dir))

    def cmd(self, command: t.Union[Command, str, t.List[str]]):
        """
        CMD in shell form (plain string) or exec form (list of strings).

        :param command: command to run
        """
        return self._append("CMD {}".format(as_command(command).format()))

    def entrypoint(self, command: t.Union[Command, str, t.List[str]]):
        """
        ENTRYPOINT in shell form (plain string) or exec form (list of strings).

        :param command: command to run
        """
        return self._append("ENTRYPOINT {}".format(as_command(command).format()))

    def volume(self, volume: t.Union[Command, str, t.List[str]]):
        """
        VOLUME with a plain string (``VOLUME /var/log``) or a list of paths (``VOLUME ["/data"]``).

        :param volume: mount point(s)
        """
        return self._append("VOLUME {}".format(as_command(volume).format()))

    def label(self, key: str, value: str):
        """
        LABEL <key>="<value>", the value is always quoted.

        :param key: label key
        :param value: label value
        """
        return self._append('LABEL {}="{}"'.format(key, value))

    def maintainer(self, name: str):
        """
        MAINTAINER <name> sets the author field of the generated image.

        :param name: maintainer name
        """
        return self._append("MAINTAINER {}".format(name))

    def expose(self, port: t.Union[int, str]):
        """
        EXPOSE <port>, the port isn't range checked.

        :param port: port (optionally with a ``/udp`` or ``/tcp`` suffix)
        """
        return self._append("EXPOSE {}".format(port))

    def user(self, user: str):
        """
        USER <user>[:<group>]

        :param user: user name or UID
        """
        return self._append("USER {}".format(user))

    def arg(self, key: str, value: t.Optional[str] = None):
        """
        ARG <name>[=<default value>], an empty default is omitted.

        :param key: name of the build argument
        :param value: default value
        """
        if value:
            return self._append("ARG {}={}".format(key, value))
        return self._append("ARG {}".format(key))

    def on_build(self, instruction: str):
        """
        ONBUILD <instruction> registers a trigger that runs in downstream builds.

        :param instruction: complete instruction, e.g. ``RUN make``
        """
        return self._append("ONBUILD {}".format(instruction))

    def stop_signal(self, signal: str):
        """
        STOPSIGNAL <signal>

        :param signal: signal number or name, e.g. ``SIGKILL``
        """
        return self._append("STOPSIGNAL {}".format(signal))

    def healthcheck(self, command: str, options: t.Optional[str] = None):
        """
        HEALTHCHECK [OPTIONS] CMD <command>

        :param command: command that checks the container
        :param options: options like ``--interval=30s``
        """
        if options:
            return self._append("HEALTHCHECK {} CMD {}".format(options, command))
        return self._append("HEALTHCHECK CMD {}".format(command))

    def shell(self, shell: t.Union[str, t.List[str]]):
        """
        SHELL ["executable", "parameters"], always written in exec form.

        :param shell: shell executable and its parameters, a plain string is the executable alone
        """
        args = [shell] if isinstance(shell, str) else list(shell)
        return self._append("SHELL {}".format(ExecForm(args).format()))

    def comment(self, comment: str):
        """
        Adds a ``# <comment>`` line.

        :param comment: comment text
        """
        return self._append("# {}".format(comment))

    def with_step(self, step: "Instructions"):
        """
        Attaches the rendered step as one block, separated from the preceding lines by a blank line.

        :param step: step (or any other renderable) to attach
        """
        return self._append("\n" + step.render())

    def build(self, context: str, tag: str, builder: t.Optional[DockerBuilder] = None):
        """
        Writes the rendered Dockerfile and builds it with docker.

        :param context: build context path
        :param tag: tag of the resulting image
        :param builder: used builder, a builder with the default settings if None
        :raises: BuildError if docker exits unsuccessfully
        :return: self
        """
        builder = builder or DockerBuilder()
        builder.build(self.render(), context, tag)
        return self


class InstructionSequence(Instructions):
    """
    An ordered list of already formatted instruction lines.
    """

    def __init__(self):
        self.lines = []  # type: t.List[str]
        """ Formatted lines in manifest order """

    def _append(self, line: str) -> "InstructionSequence":
        self.lines.append(line)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)
