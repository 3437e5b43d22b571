"""Operator-facing message literals."""

# Flash messages shown on the list screen after a redirect.
REGISTERED = "登録に成功しました"
UPDATED = "更新に成功しました"
DELETED = "削除に成功しました"

# Field errors shown when a form is re-rendered.
REQUIRED = "入力してください"
NUMBER_REQUIRED = "数値を入力してください"
DUPLICATE_NAME = "既に登録されている名前です"
DUPLICATE_EMAIL = "既に登録されているメールアドレスです"
INVALID_IMAGE = "画像ファイルが不正です"
