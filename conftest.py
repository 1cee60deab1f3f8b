# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры.
Каждый тест работает в пустом временном каталоге без numvec.json,
чтобы конфигурация пользователя не влияла на результаты.
"""

import pytest

from numvec import Quaternion
from numvec.utils.config import CONFIG_ENV, DEFAULT_CONFIG, Config
from numvec.utils.logger import logger


@pytest.fixture(autouse=True)
def clean_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    Config.reset()
    yield
    Config.reset()
    logger.setLevel(DEFAULT_CONFIG["log_level"])


@pytest.fixture
def basis():
    """Базисные кватернионы r, i, j, k (целые)."""
    Q = Quaternion[int]
    return Q(1, 0, 0, 0), Q(0, 1, 0, 0), Q(0, 0, 1, 0), Q(0, 0, 0, 1)
