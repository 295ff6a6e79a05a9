# config.py
import os


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-me')
    DEBUG = False
    TESTING = False

    # CMS collections
    QUESTIONS_COLLECTION = os.environ.get('QUESTIONS_COLLECTION', 'quizquestions')
    RESULTS_COLLECTION = os.environ.get('RESULTS_COLLECTION', 'quizresults')
    # optional JSON export that replaces the bundled content
    CMS_DATA_FILE = os.environ.get('CMS_DATA_FILE')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    CMS_DATA_FILE = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig,
}
