import yaml

from hashgen.report import build_sql_update, build_users_yaml, render_report

FAKE_HASH = "$2b$10$abcdefghijklmnopqrstuuABCDEFGHIJKLMNOPQRSTUVWXYZ01234"


def test_sql_update_embeds_hash_verbatim():
    sql = build_sql_update(FAKE_HASH)
    assert sql == f"UPDATE users SET password_hash = '{FAKE_HASH}' WHERE username = 'admin';"


def test_sql_update_does_not_escape():
    # sin sanitizar, igual que el script original
    sql = build_sql_update("it's")
    assert "'it's'" in sql


def test_render_report_layout():
    out = render_report("admin123", FAKE_HASH)
    assert out == (
        "\n=== Password Hash Generator ===\n"
        "Password: admin123\n"
        f"Hash: {FAKE_HASH}\n"
        "\nSQL Update Command:\n"
        f"UPDATE users SET password_hash = '{FAKE_HASH}' WHERE username = 'admin';\n"
        "\n=== End ===\n"
    )


def test_users_yaml_snippet():
    doc = yaml.safe_load(build_users_yaml("admin", FAKE_HASH, role=" Admin "))
    entry = doc["users"]["admin"]
    assert entry["password_hash"] == FAKE_HASH
    assert entry["name"] == "admin"
    assert entry["role"] == "admin"
    assert entry["is_active"] is True
