"""dcon: интерактивный менеджер запущенных Docker-контейнеров."""

__version__ = "2.0.0"
