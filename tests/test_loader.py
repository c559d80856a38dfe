import pytest
import yaml

from fluentdocker.dockerfile.loader import DescriptionError, load_dockerfile, load_file


def test_load_dockerfile():
    dockerfile = load_dockerfile({
        "header": False,
        "instructions": [
            {"from": "node:18-alpine"},
            {"copy": {"src": ".", "dest": "/app"}},
            {"arg": {"key": "VERSION", "value": "1"}},
            {"cmd": ["npx", "serve"]},
            {"step": {
                "name": "demo",
                "description": "Example step",
                "instructions": [{"run": "echo hello world"}]
            }}
        ]
    })
    assert dockerfile.render() == """FROM node:18-alpine
COPY . /app
ARG VERSION=1
CMD ["npx", "serve"]

# demo
# Example step
RUN echo hello world"""


def test_shell_from_plain_string():
    dockerfile = load_dockerfile({"header": False, "instructions": [{"shell": "/bin/sh"}, {"shell": ["/bin/sh", "-c"]}]})
    assert dockerfile.render() == 'SHELL ["/bin/sh"]\nSHELL ["/bin/sh", "-c"]'


def test_load_file(tmp_path):
    description = tmp_path / "build.yaml"
    description.write_text(yaml.dump({"instructions": [{"from": "alpine"}, {"expose": 80}]}))
    assert load_file(str(description)).lines == ["FROM alpine", "EXPOSE 80"]


def test_load_file_with_invalid_yaml(tmp_path):
    description = tmp_path / "build.yaml"
    description.write_text("instructions: [")
    with pytest.raises(DescriptionError):
        load_file(str(description))


@pytest.mark.parametrize("data", [
    ["from: alpine"],
    {"instructions": [{"frm": "alpine"}]},
    {"instructions": [{"from": "alpine", "run": "ls"}]},
    {"instructions": {"from": "alpine"}},
    {"instructions": [{"copy": "."}]},
    {"instructions": [{"step": {"name": "no description"}}]},
    {"instructions": [{"step": {"name": "a", "description": "b", "instruction": [{"run": "ls"}]}}]},
    {"header": "yes"},
    {"stages": []},
])
def test_malformed_descriptions(data):
    with pytest.raises(DescriptionError):
        load_dockerfile(data)


def test_load_file_is_read_as_utf8(tmp_path):
    description = tmp_path / "build.yaml"
    description.write_bytes('instructions:\n- label: {key: author, value: "Jürgen Müller"}\n'.encode("utf-8"))
    assert load_file(str(description)).lines == ['LABEL author="Jürgen Müller"']
