import logging
import os

import pytest

# 창 테스트는 디스플레이 없이 실행
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


@pytest.fixture(scope='session')
def qapp():
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(['calculator-tests'])
    yield app


@pytest.fixture
def clean_logger():
    """setup_logger가 붙인 핸들러를 테스트 후 정리"""
    logger = logging.getLogger('calculator')
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
