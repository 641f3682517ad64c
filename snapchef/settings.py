"""
Django settings for the snapchef project.

Every deployment knob is read from the environment; a local `.env` file is
loaded first when present.
"""

import os
from pathlib import Path

import dj_database_url
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def _env_truthy(name, default="false"):
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _env_list(name, default=""):
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


DEBUG = _env_truthy("DEBUG", "true")

SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-snapchef-dev-key")

ALLOWED_HOSTS = _env_list("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")

APP_NAME = os.getenv("APP_NAME", "Snap Chef API")
APP_PORT = os.getenv("APP_PORT", "8080")


# Application definition

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'corsheaders',
    'rest_framework',
    'recipes',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'snapchef.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'snapchef.wsgi.application'

# Routes are declared without trailing slashes (/api/recipes/12)
APPEND_SLASH = False


# Database

DATABASES = {
    'default': dj_database_url.config(
        default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}",
        conn_max_age=int(os.getenv("DB_CONN_MAX_AGE", "60")),
    )
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Cache: Redis when configured, process-local memory otherwise

REDIS_HOST = os.getenv("REDIS_HOST")
REDIS_PORT = int(os.getenv("REDIS_PORT", "6379"))

if REDIS_HOST:
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.redis.RedisCache',
            'LOCATION': f"redis://{REDIS_HOST}:{REDIS_PORT}/0",
            'KEY_PREFIX': 'snapchef',
        }
    }
else:
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
            'LOCATION': 'snapchef',
        }
    }


# Authentication

AUTH_USER_MODEL = 'recipes.User'

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.Argon2PasswordHasher',
    'django.contrib.auth.hashers.PBKDF2PasswordHasher',
]

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
        'OPTIONS': {'min_length': 8},
    },
]

JWT_SECRET = os.getenv("JWT_SECRET")
if not JWT_SECRET:
    if not DEBUG:
        raise RuntimeError("JWT_SECRET must be set when DEBUG is off")
    JWT_SECRET = "snapchef-dev-jwt-secret-change-me-0123456789"

JWT = {
    'SECRET': JWT_SECRET,
    'ALGORITHM': 'HS256',
    'ACCESS_TOKEN_EXPIRES_IN': os.getenv("JWT_ACCESS_TOKEN_EXPIRES_IN", "15m"),
    'REFRESH_TOKEN_EXPIRES_IN': os.getenv("JWT_REFRESH_TOKEN_EXPIRES_IN", "30d"),
}


# REST framework

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'recipes.authentication.JWTAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    'EXCEPTION_HANDLER': 'recipes.exceptions.api_exception_handler',
}

PAGINATION = {
    'DEFAULT_PAGE': 1,
    'MAX_LIMIT': 100,
    'RECIPES_LIMIT': 15,
    'COMMENTS_LIMIT': 10,
    'USERS_LIMIT': 5,
    'INGREDIENTS_LIMIT': 20,
    'MODERATION_LIMIT': 15,
}

USER_CACHE_TTL = int(os.getenv("USER_CACHE_TTL", "60"))


# CORS for the single-page client

CORS_ALLOWED_ORIGINS = _env_list(
    "CORS_ALLOWED_ORIGINS", "http://localhost:5173,http://localhost:3000"
)
CORS_URLS_REGEX = r"^/api/.*$"


# Internationalization

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


# Static files

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'


# Logging

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'timestamped': {
            'format': '[{asctime}] {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'timestamped',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'recipes': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
