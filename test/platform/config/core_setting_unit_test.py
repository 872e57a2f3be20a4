from pathlib import Path

import pytest

from src.platform.config.core_setting import Settings


ENV_EXAMPLE = Path(__file__).resolve().parents[3] / '.env.example'


@pytest.mark.unit
class TestSettings:
    def test_env_example_loads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('BACKEND_CORS_ORIGINS', raising=False)

        settings = Settings(_env_file=ENV_EXAMPLE)  # type: ignore[call-arg]

        assert settings.BACKEND_CORS_ORIGINS == ['http://localhost:3000']
        assert settings.SHIPPING_FEE == 150

    @pytest.mark.parametrize(
        'raw, expected',
        [
            (
                'https://parofc.com, http://localhost:3000',
                ['https://parofc.com', 'http://localhost:3000'],
            ),
            ('["https://parofc.com"]', ['https://parofc.com']),
            ('', []),
        ],
    )
    def test_cors_origins_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: list[str]
    ) -> None:
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', raw)

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.BACKEND_CORS_ORIGINS == expected
