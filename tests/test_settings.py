from config.settings import Settings


def test_database_url_precedence():
    assert Settings(DB_URL="sqlite://", DB_HOST="db").DATABASE_URL == "sqlite://"
    assert (
        Settings(DB_URL=None, DB_HOST="db", DB_USER="u", DB_PASSWORD="p", DB_NAME="cal").DATABASE_URL
        == "mysql+pymysql://u:p@db:3306/cal"
    )
    assert Settings(DB_URL=None, DB_HOST=None, SQLITE_PATH="x.sqlite").DATABASE_URL == "sqlite:///x.sqlite"


def test_cors_origins_from_comma_string():
    assert Settings(CORS_ORIGINS="http://a, http://b ,").CORS_ORIGINS == ["http://a", "http://b"]
