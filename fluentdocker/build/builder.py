import logging
import subprocess
import typing as t

from ..utils.settings import Settings


class BuildResult(t.NamedTuple):
    """ Outcome of a docker build """

    success: bool
    out: str
    err: str
    ret_code: int


class DockerBuilder:
    """
    Writes a rendered Dockerfile and builds it with the docker command line tool.
    """

    def __init__(self, docker: t.Optional[str] = None, dockerfile: t.Optional[str] = None):
        """
        Creates a new builder.

        :param docker: build tool executable, defaults to `build/docker`
        :param dockerfile: file the Dockerfile is written to, defaults to `build/dockerfile`
        """
        self.docker = Settings().default(docker, "build/docker")  # type: str
        """ Build tool executable """
        self.dockerfile = Settings().default(dockerfile, "build/dockerfile")  # type: str
        """ File (relative to the current working directory) that the Dockerfile is written to """

    def build_cmd(self, context: str, tag: str) -> t.List[str]:
        """
        Returns the build command for the passed context and tag.
        """
        return [self.docker, "build", context, "-t", tag, "-f", self.dockerfile]

    def build(self, manifest: str, context: str, tag: str) -> BuildResult:
        """
        Write the manifest and build it, blocks till the build tool exits.

        :param manifest: rendered Dockerfile
        :param context: build context path, passed to the build tool as is
        :param tag: tag of the resulting image
        :return: result of the successful build
        :raises: OSError if the Dockerfile can't be written or the build tool can't be started
        :raises: BuildError if the build tool exits unsuccessfully
        """
        with open(self.dockerfile, "w", encoding="utf-8") as f:
            f.write(manifest)
        cmd = self.build_cmd(context, tag)
        logging.info("Building image {!r} from {!r}".format(tag, context))
        logging.debug("cmd: {!r}".format(cmd))
        proc = subprocess.Popen(cmd,
                                stdout=subprocess.PIPE,
                                stderr=subprocess.PIPE,
                                encoding="utf-8",
                                errors="replace")
        out, err = proc.communicate()
        result = BuildResult(proc.returncode == 0, str(out), str(err), proc.returncode)
        if not result.success:
            if result.err:
                logging.error(result.err)
            raise BuildError(tag, cmd, result)
        if result.out:
            logging.info(result.out)
        if result.err:
            logging.info(result.err)
        logging.info("Successfully built image {!r}".format(tag))
        return result


class BuildError(Exception):
    """
    Error raised if the build tool exits with a non zero return code.
    """

    def __init__(self, tag: str, cmd: t.List[str], result: BuildResult):
        super().__init__("Build failed")
        self.tag = tag
        """ Tag of the image that couldn't be built """
        self.cmd = cmd
        """ Executed build command """
        self.result = result
        """ Captured output and return code """

    def log(self):
        logging.error("Build error for {}".format(self.tag))
        logging.error("out: {!r}".format(self.result.out))
        logging.error("err: {!r}".format(self.result.err))
        logging.error("cmd: {!r}".format(self.cmd))
