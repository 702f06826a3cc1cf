import json
from dataclasses import dataclass
from typing import List

import pytest
import yaml

from confkeeper.core.exceptions import DecodeError
from confkeeper.core.models import Configuration
from confkeeper.core.serializers import JsonSerializer, YamlSerializer, serializer_for_path


@dataclass
class Profile(Configuration):
    user: str
    retries: int
    servers: List[str]


@pytest.fixture
def profile():
    config = Profile(user="ünïcode", retries=3, servers=["a", "b"])
    config.location = "/home/user/.app/profile.json"
    return config


class TestJsonSerializer:

    def test_encode_is_indented_and_excludes_location(self, profile):
        text = JsonSerializer().encode(profile)
        assert text == (
            '{\n'
            '  "user": "ünïcode",\n'
            '  "retries": 3,\n'
            '  "servers": [\n'
            '    "a",\n'
            '    "b"\n'
            '  ]\n'
            '}\n'
        )
        assert "location" not in json.loads(text)

    def test_custom_indent(self, profile):
        assert '\n    "user"' in JsonSerializer(indent=4).encode(profile)

    def test_decode(self, profile):
        serializer = JsonSerializer()
        decoded = serializer.decode(serializer.encode(profile), Profile)
        assert decoded == profile
        assert decoded.location == ""

    @pytest.mark.parametrize("text", ["", "{", "{'user': 'x'}", "[1, 2]", '{"retries": "many"}'])
    def test_decode_invalid_raises(self, text):
        with pytest.raises(DecodeError):
            JsonSerializer().decode(text, Profile)


    def test_parse_returns_document(self):
        assert JsonSerializer().parse('{"user": "x", "servers": []}') == {"user": "x", "servers": []}

    def test_deeply_nested_input_raises_decode_error(self):
        with pytest.raises(DecodeError) as excinfo:
            JsonSerializer().parse("[" * 200000 + "]" * 200000)
        assert isinstance(excinfo.value.cause, RecursionError)


class TestYamlSerializer:

    def test_encode_is_block_style(self, profile):
        text = YamlSerializer().encode(profile)
        assert yaml.safe_load(text) == {"user": "ünïcode", "retries": 3, "servers": ["a", "b"]}
        assert text.startswith("user: ")
        assert "- a" in text

    def test_decode(self, profile):
        serializer = YamlSerializer()
        assert serializer.decode(serializer.encode(profile), Profile) == profile

    @pytest.mark.parametrize("text", ["", "user: [unclosed", "- just\n- a list\n"])
    def test_decode_invalid_raises(self, text):
        with pytest.raises(DecodeError):
            YamlSerializer().decode(text, Profile)


@pytest.mark.parametrize("location,expected", [
    ("/etc/app/config.json", JsonSerializer),
    ("/etc/app/config.yml", YamlSerializer),
    ("/etc/app/config.YAML", YamlSerializer),
    ("/etc/app/config", JsonSerializer),
])
def test_serializer_for_path(location, expected):
    assert isinstance(serializer_for_path(location), expected)
