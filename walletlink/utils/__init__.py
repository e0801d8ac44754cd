from .utils import (
    sleeping,
    make_banner,
    format_proxy,
)
from .window_name import WindowName
from .modes import choose_mode, choose_platform, choose_version, choose_after_batch
from .tg_report import TgReport
