from pathlib import Path

import pytest
from django.conf import settings

SETTINGS_DIR = Path(settings.BASE_DIR) / 'portal_noticias' / 'settings'


@pytest.mark.parametrize("name", ["base.py", "development.py", "test.py"])
def test_settings_carry_no_email_configuration(name):
    # Não há envio de e-mail: usuários do painel nascem confirmados
    source = (SETTINGS_DIR / name).read_text(encoding='utf-8')
    assert 'EMAIL_BACKEND' not in source
    assert 'DEFAULT_FROM_EMAIL' not in source
