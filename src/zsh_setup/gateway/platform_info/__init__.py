"""Operating system identification."""

from zsh_setup.gateway.platform_info.abc import PlatformInfo as PlatformInfo
from zsh_setup.gateway.platform_info.fake import FakePlatformInfo as FakePlatformInfo
from zsh_setup.gateway.platform_info.real import RealPlatformInfo as RealPlatformInfo
