"""
Structural design patterns.
"""
from . import adapter, bridge, composite, decorator, facade, flyweight, proxy
from .adapter import MediaPlayer, AdvancedMediaPlayer, MediaAdapter
from .bridge import Device, TV, Radio, RemoteControl, AdvancedRemoteControl
from .composite import FileSystemComponent, File, Directory
from .decorator import Beverage, Espresso, HouseBlend, CondimentDecorator, Milk, Mocha
from .facade import PaymentGatewayFacade, PayPalGateway, StripeGateway
from .flyweight import FontFlyweight, DocumentFontFactory, Document
from .proxy import Server, RealServer, ProxyServer

DEMOS = {
    'adapter': adapter.main,
    'bridge': bridge.main,
    'composite': composite.main,
    'decorator': decorator.main,
    'facade': facade.main,
    'flyweight': flyweight.main,
    'proxy': proxy.main,
}

__all__ = [
    'MediaPlayer',
    'AdvancedMediaPlayer',
    'MediaAdapter',
    'Device',
    'TV',
    'Radio',
    'RemoteControl',
    'AdvancedRemoteControl',
    'FileSystemComponent',
    'File',
    'Directory',
    'Beverage',
    'Espresso',
    'HouseBlend',
    'CondimentDecorator',
    'Milk',
    'Mocha',
    'PaymentGatewayFacade',
    'PayPalGateway',
    'StripeGateway',
    'FontFlyweight',
    'DocumentFontFactory',
    'Document',
    'Server',
    'RealServer',
    'ProxyServer',
    'DEMOS',
]
