"""Точка входа в приложение."""
from imgtile.app import ImgTileApp


def main() -> int:
    """Создаёт приложение и выполняет один запуск склейки."""
    app = ImgTileApp()
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
