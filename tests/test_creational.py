"""Tests for creational patterns."""
import io
import threading
import pytest
from creational import (
    Platform,
    factory_for,
    render_widgets,
    WindowsFactory,
    MacOSFactory,
    Computer,
    ComputerBuilder,
    ComputerDirector,
    LoggerType,
    MessageLoggerFactory,
    ConsoleLogger,
    FileLogger,
    CircleShape,
    RectangleShape,
    ContractDocument,
    PrototypeRegistry,
    InstanceRegistry,
    Database,
)
from creational import factory, singleton
from utils.exceptions import ConfigurationError, PrototypeNotFoundError


class TestAbstractFactory:
    """Tests for platform widget families."""

    def test_families_match(self):
        """Each factory produces widgets of its own platform."""
        assert render_widgets(WindowsFactory()) == [
            "Rendering a Windows button",
            "Rendering a Windows checkbox",
        ]
        assert render_widgets(MacOSFactory()) == [
            "Rendering a macOS button",
            "Rendering a macOS checkbox",
        ]

    def test_factory_for_platform(self):
        assert isinstance(factory_for(Platform.WINDOWS), WindowsFactory)
        assert isinstance(factory_for("macos"), MacOSFactory)

    def test_unknown_platform(self):
        """An unknown platform is a construction failure."""
        with pytest.raises(ConfigurationError) as exc_info:
            factory_for("amiga")
        assert exc_info.value.details['available_platforms'] == ['windows', 'macos']


class TestBuilder:
    """Tests for the computer builder."""

    def _configure(self, builder):
        return (
            builder
            .set_processor("AMD Ryzen 7")
            .set_ram("32GB")
            .set_hard_drive("1TB SSD")
            .set_graphics_card("Nvidia RTX 3070")
        )

    def test_equivalent_builds_are_equal_but_distinct(self):
        """Two equivalent builds give equal, separate products."""
        builder = ComputerBuilder()
        first = self._configure(builder).build()
        second = self._configure(builder).build()

        assert first == second
        assert first is not second

    def test_build_resets_builder(self):
        """A build after build() starts from a blank product."""
        builder = ComputerBuilder()
        self._configure(builder).build()

        partial = builder.set_ram("8GB").build()

        assert partial == Computer(ram="8GB")
        assert partial.processor is None
        assert partial.graphics_card is None

    def test_director_recipes(self):
        director = ComputerDirector()
        gaming = director.build_gaming_pc()
        office = director.build_office_pc()

        assert gaming.graphics_card == "Nvidia RTX 3070"
        assert office.graphics_card is None
        assert office.processor == "Intel Core i5"


class TestFactory:
    """Tests for the message logger factory."""

    def test_every_logger_type_registered(self):
        """Each enum member has a constructor."""
        assert set(MessageLoggerFactory.list_available()) == set(LoggerType)
        MessageLoggerFactory.check_exhaustive()

    def test_console_logger(self):
        stream = io.StringIO()
        logger = MessageLoggerFactory.create(LoggerType.CONSOLE, stream=stream)

        logger.log("hello")

        assert isinstance(logger, ConsoleLogger)
        assert stream.getvalue() == "[Console] hello\n"

    def test_console_logger_defaults_to_stdout(self, capsys):
        MessageLoggerFactory.create("console").log("to stdout")
        assert capsys.readouterr().out == "[Console] to stdout\n"

    def test_file_logger_creates_and_appends(self, tmp_path):
        """The file logger creates the file and never truncates it."""
        path = tmp_path / "logs.txt"
        logger = MessageLoggerFactory.create(LoggerType.FILE, file_path=str(path))

        logger.log("first")
        MessageLoggerFactory.create(LoggerType.FILE, file_path=str(path)).log("second")

        assert isinstance(logger, FileLogger)
        assert path.read_text(encoding='utf-8') == "[File] first\n[File] second\n"

    def test_file_logger_keeps_existing_content(self, tmp_path):
        path = tmp_path / "existing.txt"
        path.write_text("already here\n", encoding='utf-8')

        FileLogger(str(path)).log("ünïcode")

        assert path.read_text(encoding='utf-8') == "already here\n[File] ünïcode\n"

    def test_file_logger_requires_path(self):
        """A file logger without a path cannot be constructed."""
        with pytest.raises(ConfigurationError, match="File path is missing"):
            MessageLoggerFactory.create(LoggerType.FILE)

    def test_unknown_logger_type(self):
        with pytest.raises(ConfigurationError, match="Invalid logger type"):
            MessageLoggerFactory.create("syslog")

    def test_demo_writes_configured_file(self, tmp_path, capsys):
        path = tmp_path / "demo.txt"
        factory.main(log_file=str(path))

        assert "[Console] This is a console log." in capsys.readouterr().out
        assert path.read_text(encoding='utf-8') == "[File] This is a file log.\n"


class TestPrototype:
    """Tests for the prototype registry."""

    def test_get_returns_fresh_clone(self):
        """Each lookup is a new object equal in content to the template."""
        registry = PrototypeRegistry().load_defaults()

        first = registry.get("Circle")
        second = registry.get("Circle")

        assert isinstance(first, CircleShape)
        assert first is not second
        assert first.draw() == "Drawing Circle with radius: 10"
        assert registry.get("Rectangle").draw() == "Drawing Rectangle with width: 10 and height: 5"

    def test_clone_is_independent(self):
        """Changing a clone leaves the registered template untouched."""
        registry = PrototypeRegistry()
        registry.register("wide", RectangleShape(20, 1))

        clone = registry.get("wide")
        clone.width = 99

        assert registry.get("wide").width == 20

    def test_registries_are_separate(self):
        """Two registries do not share entries."""
        first = PrototypeRegistry().load_defaults()
        second = PrototypeRegistry()

        assert first.names() == ["Circle", "Rectangle"]
        assert second.names() == []

    def test_unknown_prototype(self):
        with pytest.raises(PrototypeNotFoundError):
            PrototypeRegistry().get("Hexagon")

    def test_contract_clone(self):
        standard = ContractDocument(clauses=["confidentiality"])
        custom = standard.clone()
        custom.content = "Customized Contract Content"
        custom.clauses.append("termination")

        assert standard.render() == "Standard Contract Template"
        assert custom.render() == "Customized Contract Content"
        assert standard.clauses == ["confidentiality"]


class TestSingleton:
    """Tests for the instance registry."""

    def test_same_instance_returned(self):
        """Repeated lookups return the identical instance."""
        registry = InstanceRegistry()
        assert registry.get(Database) is registry.get(Database)
        assert len(registry) == 1

    def test_registries_isolated(self):
        assert InstanceRegistry().get(Database) is not InstanceRegistry().get(Database)

    def test_reset(self):
        registry = InstanceRegistry()
        first = registry.get(Database)
        registry.reset()

        assert Database not in registry
        assert registry.get(Database) is not first

    def test_custom_factory(self):
        registry = InstanceRegistry()
        created = Database()
        assert registry.get(Database, factory=lambda: created) is created

    def test_concurrent_access_creates_one_instance(self):
        """Threads racing for the instance all get the same one."""
        registry = InstanceRegistry()
        seen = []

        def grab():
            seen.append(registry.get(Database))

        threads = [threading.Thread(target=grab) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(instance) for instance in seen}) == 1

    def test_query(self):
        database = InstanceRegistry().get(Database)
        assert database.query("SELECT 1") == "Querying database: SELECT 1"
        assert database.queries == ["SELECT 1"]

    def test_demo_output(self, capsys):
        singleton.main()
        assert "The Singleton pattern works!" in capsys.readouterr().out
