from prcheck.config.settings import LoggingSettings, Settings, load_settings

__all__ = [
    'Settings',
    'LoggingSettings',
    'load_settings',
]
