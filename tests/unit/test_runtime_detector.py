"""Unit tests for executable normalization and runtime dispatch."""

import pytest
from proccontext.detection import RuntimeDetector, normalize_executable, split_version, remove_file_path
from proccontext.extractors import JavaExtractor, PythonExtractor, RubyExtractor, SubExtractor
from proccontext.ir import RuntimeType


class TestSplitVersion:
    @pytest.mark.parametrize("name,expected", [
        ("", ("", "")),
        ("python2.7", ("python", "2.7")),
        ("python2", ("python", "2")),
        ("ruby2.3", ("ruby", "2.3")),
        ("ruby2", ("ruby", "2")),
        ("python3.11.4", ("python", "3.11.4")),
        ("java", ("java", "")),
        ("2.7", ("", "2.7")),
        ("py3k", ("py3k", "")),
    ])
    def test_split_version(self, name, expected):
        assert split_version(name) == expected


class TestNormalizeExecutable:
    def test_strips_directories(self):
        assert normalize_executable("/opt/python/2.7.11/bin/python2.7") == ("python2.7", "python")

    def test_strips_exe_suffix_case_insensitively(self):
        assert normalize_executable("JAVA.EXE") == ("JAVA", "JAVA")
        assert normalize_executable("java.exe") == ("java", "java")

    def test_windows_path(self):
        assert normalize_executable("C:\\Program Files\\Java\\bin\\java.exe") == ("java", "java")

    def test_path_with_spaces(self):
        assert normalize_executable("/home/dd/my java dir/java") == ("java", "java")

    def test_normalized_name_is_unchanged(self):
        """Test: Normalizing an already normalized basename is a no-op."""
        basename, base = normalize_executable("sudo")
        assert normalize_executable(basename) == (basename, base) == ("sudo", "sudo")

    def test_remove_file_path(self):
        assert remove_file_path("") == ""
        assert remove_file_path("/usr/bin/") == "bin"
        assert remove_file_path("./my-server.sh") == "my-server.sh"


class TestRuntimeDetector:
    def setup_method(self):
        self.detector = RuntimeDetector()

    @pytest.mark.parametrize("executable,runtime", [
        ("python", RuntimeType.PYTHON),
        ("python3", RuntimeType.PYTHON),
        ("/usr/bin/python3.9", RuntimeType.PYTHON),
        ("ruby2.3", RuntimeType.RUBY),
        ("/usr/local/bin/ruby2.7", RuntimeType.RUBY),
        ("java", RuntimeType.JAVA),
        ("/usr/lib/jvm/bin/java.exe", RuntimeType.JAVA),
        ("sudo", RuntimeType.SUB),
    ])
    def test_known_runtimes(self, executable, runtime):
        assert self.detector.detect(executable) == runtime

    @pytest.mark.parametrize("executable", ["./my-server.sh", "nginx", "Python", "", "javac"])
    def test_unknown_executables(self, executable):
        assert self.detector.detect(executable) is None

    def test_extractor_for_each_runtime(self):
        assert isinstance(self.detector.extractor_for(RuntimeType.SUB), SubExtractor)
        assert isinstance(self.detector.extractor_for(RuntimeType.PYTHON), PythonExtractor)
        assert isinstance(self.detector.extractor_for(RuntimeType.RUBY), RubyExtractor)
        assert isinstance(self.detector.extractor_for(RuntimeType.JAVA), JavaExtractor)

    def test_dispatch_table_is_read_only(self):
        with pytest.raises(TypeError):
            RuntimeDetector.BINARY_MAP["node"] = RuntimeType.SUB
