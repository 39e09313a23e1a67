"""Точка входа в приложение."""
import logging

from rgb_inspector.app import RgbInspectorApp
from rgb_inspector.config import load_config


def main() -> None:
    """Настраивает логирование, создаёт и запускает главное окно приложения."""
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app = RgbInspectorApp(config)
    app.mainloop()


if __name__ == "__main__":
    main()
