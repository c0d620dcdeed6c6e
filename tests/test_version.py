import platform

from kafkactl.version import VersionInfo, current_version_info


def test_version_output_prefix():
    info = current_version_info(
        "1.8.0",
        "2020-05-21T11:14:58+00:00",
        "ef6a0263c9623d44d198a0f39d712ddb76bb5c04",
    )
    expected = (
        'cmd.info{version:"1.8.0", buildTime:"2020-05-21T11:14:58+00:00", '
        'gitCommit:"ef6a0263c9623d44d198a0f39d712ddb76bb5c04"'
    )
    assert info.format().startswith(expected)
    assert info.format().endswith("}")


def test_runtime_details():
    info = current_version_info()
    assert info.version == "latest"
    assert info.python_version == platform.python_version()
    assert "/" in info.platform


def test_format_quotes_values():
    info = VersionInfo('a"b', "", "", "3", "impl", "os/arch")
    assert 'version:"a\\"b"' in info.format()
    assert 'platform:"os/arch"' in info.format()