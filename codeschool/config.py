"""
Course Platform Configuration
Database, CMS and auth settings
"""

import os

# MongoDB
MONGO_URL = os.getenv("MONGO_URL", "mongodb://localhost:27017")
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "dcs-test")

# Contentful (headless CMS)
CONTENTFUL_SPACE_ID = os.getenv("CONTENTFUL_SPACE_ID", "")
CONTENTFUL_ACCESS_TOKEN = os.getenv("CONTENTFUL_ACCESS_TOKEN", "")
CONTENTFUL_ENVIRONMENT = os.getenv("CONTENTFUL_ENVIRONMENT", "master")
CONTENTFUL_GRAPHQL_URL = os.getenv(
    "CONTENTFUL_GRAPHQL_URL", "https://graphql.contentful.com/content/v1"
)
CONTENTFUL_CDN_URL = os.getenv("CONTENTFUL_CDN_URL", "https://cdn.contentful.com")
CMS_TIMEOUT_SECONDS = float(os.getenv("CMS_TIMEOUT_SECONDS", "20"))

# Auth (tokens are issued by the external identity provider)
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

# Lesson pages
SITE_NAME = os.getenv("SITE_NAME", "Dot Code School")
DEFAULT_GITHUB_URL = os.getenv("DEFAULT_GITHUB_URL", "https://github.com/dotcodeschool/frontend")
DEFAULT_FILE_LANGUAGE = os.getenv("DEFAULT_FILE_LANGUAGE", "rust")

# HTTP
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
