"""Tests for structural patterns."""
from decimal import Decimal
import pytest
from structural import (
    MediaAdapter,
    TV,
    Radio,
    RemoteControl,
    AdvancedRemoteControl,
    File,
    Directory,
    Espresso,
    HouseBlend,
    Milk,
    Mocha,
    PaymentGatewayFacade,
    FontFlyweight,
    DocumentFontFactory,
    Document,
    RealServer,
    ProxyServer,
)
from structural import adapter, bridge, composite, decorator, facade, proxy
from structural.bridge import exercise_remote
from utils.exceptions import PatternError, ValidationError


class TestAdapter:
    """Tests for the media adapter."""

    def test_supported_formats(self):
        adapter = MediaAdapter()
        assert adapter.play("vlc", "movie.vlc") == "Playing vlc file: movie.vlc"
        assert adapter.play("MP4", "movie.mp4") == "Playing mp4 file: movie.mp4"
        assert adapter.supported_types == ["mp4", "vlc"]

    def test_unsupported_format_is_reported(self):
        """Unknown formats produce a diagnostic instead of an error."""
        assert MediaAdapter().play("avi", "movie.avi") == "Unsupported media type: avi"

    def test_demo_output(self, capsys):
        adapter.main()
        assert capsys.readouterr().out.splitlines() == [
            "Client: I can work just fine with the MediaPlayer objects:",
            "Playing vlc file: movie.vlc",
            "Playing mp4 file: movie.mp4",
        ]


class TestBridge:
    """Tests for remotes driving devices."""

    def test_tv_remote(self):
        remote = RemoteControl(TV())

        assert remote.toggle_power() == "RemoteControl: Turning on the device."
        assert remote.volume_up() == "RemoteControl: Increasing volume to 60."
        assert remote.volume_down() == "RemoteControl: Decreasing volume to 50."
        assert remote.toggle_power() == "RemoteControl: Turning off the device."

    def test_radio_starting_volume(self):
        remote = AdvancedRemoteControl(Radio())
        remote.volume_down()
        assert remote.volume_down() == "RemoteControl: Decreasing volume to 10."

    def test_volume_clamped(self):
        """Out-of-range volumes are clamped without complaint."""
        tv = TV()
        tv.set_volume(95)
        RemoteControl(tv).volume_up()
        assert tv.get_volume() == 100

        tv.set_volume(-20)
        assert tv.get_volume() == 0

    def test_mute(self):
        radio = Radio()
        assert AdvancedRemoteControl(radio).mute() == "AdvancedRemoteControl: Muting the device."
        assert radio.get_volume() == 0

    def test_exercise_remote(self, capsys):
        """Power on, one step up, two steps down."""
        tv = TV()
        exercise_remote(RemoteControl(tv))

        assert capsys.readouterr().out.splitlines() == [
            "RemoteControl: Turning on the device.",
            "RemoteControl: Increasing volume to 60.",
            "RemoteControl: Decreasing volume to 50.",
            "RemoteControl: Decreasing volume to 40.",
        ]
        assert tv.is_enabled()

    def test_demo_output(self, capsys):
        bridge.main()
        out = capsys.readouterr().out
        assert "Client: Testing Radio remote control..." in out
        assert out.rstrip().endswith("AdvancedRemoteControl: Muting the device.")


class TestComposite:
    """Tests for the file system tree."""

    def _tree(self):
        root = Directory("Root")
        documents = root.add(Directory("Documents"))
        pictures = root.add(Directory("Pictures"))
        documents.add(File("Document1.txt", 100))
        pictures.add(File("Picture1.jpg", 200))
        pictures.add(File("Picture2.jpg", 300))
        return root, documents, pictures

    def test_sizes_sum_recursively(self):
        root, documents, pictures = self._tree()
        assert documents.size == 100
        assert pictures.size == 500
        assert root.size == 600

    def test_parent_links(self):
        root, documents, pictures = self._tree()
        picture = pictures.children[0]

        assert picture.parent is pictures
        assert picture.path == "Root/Pictures/Picture1.jpg"

        pictures.remove(picture)
        assert picture.parent is None
        assert pictures.size == 300

    def test_add_moves_component(self):
        """Adding a component to a new directory detaches it from the old one."""
        root, documents, pictures = self._tree()
        document = documents.children[0]

        pictures.add(document)

        assert documents.size == 0
        assert document.parent is pictures
        assert root.size == 600

    def test_add_to_itself_rejected(self):
        root = Directory("Root")
        with pytest.raises(PatternError):
            root.add(root)
        assert root.children == []

    def test_add_ancestor_rejected(self):
        """A directory cannot be moved below one of its own descendants."""
        root, documents, _ = self._tree()
        nested = documents.add(Directory("Nested"))

        with pytest.raises(PatternError):
            nested.add(root)

        assert root.parent is None
        assert root.size == 600
        assert nested.path == "Root/Documents/Nested"

    def test_ls(self):
        root, _, _ = self._tree()
        assert root.ls() == [
            "Directory: Root, Size: 600 bytes",
            "  Directory: Documents, Size: 100 bytes",
            "    File: Document1.txt, Size: 100 bytes",
            "  Directory: Pictures, Size: 500 bytes",
            "    File: Picture1.jpg, Size: 200 bytes",
            "    File: Picture2.jpg, Size: 300 bytes",
        ]

    def test_demo_output(self, capsys):
        composite.main()
        assert capsys.readouterr().out.startswith("Directory: Root, Size: 600 bytes")


class TestDecorator:
    """Tests for condiment decorators."""

    def test_plain_beverages(self):
        assert Espresso().cost() == Decimal("1.99")
        assert HouseBlend().description == "House Blend Coffee"

    def test_decorators_stack(self):
        """Each condiment adds its name and price to the wrapped beverage."""
        beverage = Milk(Mocha(Espresso()))

        assert beverage.description == "Espresso, Mocha, Milk"
        assert beverage.cost() == Decimal("2.29")

    def test_demo_output(self, capsys):
        decorator.main()
        out = capsys.readouterr().out
        assert "DESCRIPTION: Espresso, Mocha, Milk" in out
        assert "COST: $2.29" in out


class TestFacade:
    """Tests for the payment gateway facade."""

    def test_known_methods(self):
        facade = PaymentGatewayFacade()
        assert facade.process_payment("paypal", 100) == "Payment made using PayPal: $100"
        assert facade.process_payment("stripe", 150) == "Payment made using Stripe: $150"

    def test_invalid_method(self):
        """Unknown methods are reported, not raised."""
        assert PaymentGatewayFacade().process_payment("bitcoin", 5) == "Invalid payment method: bitcoin"

    def test_demo_output(self, capsys):
        facade.main()
        assert capsys.readouterr().out.splitlines() == [
            "Payment made using PayPal: $100",
            "Payment made using Stripe: $150",
        ]


class TestFlyweight:
    """Tests for shared fonts."""

    def test_same_key_shares_instance(self):
        fonts = DocumentFontFactory(preload=[])
        assert fonts.get_font("Arial", "Bold") is fonts.get_font("Arial", "Bold")

    def test_different_keys_are_distinct(self):
        fonts = DocumentFontFactory(preload=[])
        assert fonts.get_font("Arial", "Bold") is not fonts.get_font("Arial", "Regular")

    def test_registry_grows_only_with_distinct_keys(self):
        """The registry holds one entry per distinct key requested."""
        fonts = DocumentFontFactory(preload=[])
        requests = [("Arial", "Bold"), ("Verdana", "Regular"), ("Arial", "Bold"), ("Verdana", "Regular")]
        for family, style in requests:
            fonts.get_font(family, style)

        assert len(fonts) == 2
        assert fonts.keys == [("Arial", "Bold"), ("Verdana", "Regular")]

    def test_default_preload(self):
        fonts = DocumentFontFactory()
        assert len(fonts) == 5
        fonts.get_font("Arial", "Regular")
        assert len(fonts) == 5

    def test_flyweight_is_immutable(self):
        font = FontFlyweight("Arial", "Bold")
        with pytest.raises(AttributeError):
            font.style = "Italic"

    def test_documents_share_font(self):
        fonts = DocumentFontFactory(preload=[])
        first = Document("One", "Arial", "Bold", 10, "Red", fonts)
        second = Document("Two", "Arial", "Bold", 14, "Blue", fonts)

        assert first.font is second.font
        assert second.render() == [
            "Rendering text: Two",
            "Font Family: Arial",
            "Font Style: Bold",
            "Font Size: 14",
            "Font Color: Blue",
        ]


class TestProxy:
    """Tests for the caching proxy."""

    def test_repeat_served_from_cache(self):
        """The second request for a resource never reaches the server."""
        server = RealServer()
        proxy_server = ProxyServer(server)

        assert proxy_server.request("/data1") == "RealServer: Handling request for resource '/data1'."
        assert proxy_server.request("/data1") == "ProxyServer: Serving resource '/data1' from cache."

        assert server.handled == ["/data1"]
        stats = proxy_server.stats()
        assert stats['hits'] == 1
        assert stats['misses'] == 1

    def test_lru_eviction(self):
        """With a capacity, the least recently used resource is evicted."""
        server = RealServer()
        proxy_server = ProxyServer(server, capacity=2)

        proxy_server.request("/a")
        proxy_server.request("/b")
        proxy_server.request("/a")
        proxy_server.request("/c")
        proxy_server.request("/b")

        assert server.handled == ["/a", "/b", "/c", "/b"]
        assert list(proxy_server.cache) == ["/c", "/b"]

    def test_cache_holds_server_response(self):
        proxy_server = ProxyServer(RealServer())
        response = proxy_server.request("/data1")
        assert proxy_server.cache["/data1"] == response

    def test_invalid_capacity(self):
        with pytest.raises(ValidationError):
            ProxyServer(RealServer(), capacity=0)

    def test_clear(self):
        proxy_server = ProxyServer(RealServer())
        proxy_server.request("/a")
        proxy_server.clear()
        assert proxy_server.stats()['size'] == 0
        assert proxy_server.stats()['misses'] == 0

    def test_demo_output(self, capsys):
        proxy.main()
        out = capsys.readouterr().out
        assert "ProxyServer: Serving resource '/data1' from cache." in out
        assert "ProxyServer: 1 cache hits" in out
