"""Localized messages for API errors and notification mails.

Keys are stable message identifiers; unknown keys translate to themselves.
Templates use ``str.format`` placeholders.
"""

_MAIL_FRAME = (
    "<div style='border-top:2px solid #12ADDB;box-shadow:0 1px 3px #AAAAAA;"
    "line-height:180%;padding:0 15px 12px;margin:50px auto;font-size:12px;'>"
    "<h2 style='border-bottom:1px solid #DDD;font-size:14px;font-weight:normal;"
    "padding:13px 0 10px 8px;'>{heading}</h2>"
    "<p><strong>{{nick}}</strong>{said}</p>"
    "<div style='background-color:#f5f5f5;padding:10px 15px;margin:18px 0;"
    "word-wrap:break-word;'>{{comment}}</div>"
    "<p><a style='text-decoration:none;color:#12addb' href='{{post_url}}' "
    "target='_blank'>{link}</a></p><br/></div>"
)

_SITE_LINK = (
    "<a style='text-decoration:none;color:#12ADDB;' href='{site_url}' "
    "target='_blank'>{site_name}</a>"
)

EN: dict[str, str] = {
    "Error": "Something went wrong",
    "Upstream Error": "Upstream service unavailable",
    "Invalid Request": "Invalid request",
    "Not Found": "Not found",
    "Unauthorized": "Unauthorized",
    "FORBIDDEN": "FORBIDDEN",
    "USER_NOT_EXIST": "USER_NOT_EXIST",
    "USER_REGISTERED": "USER_REGISTERED",
    "TOKEN_EXPIRED": "TOKEN_EXPIRED",
    "TWO_FACTOR_AUTH_ERROR_DETAIL": "TWO_FACTOR_AUTH_ERROR_DETAIL",
    "Duplicate Content": "Duplicate Content",
    "Comment too fast": "Comment too fast",
    "MAIL_SUBJECT_ADMIN": "New comment on {site_name}",
    "MAIL_TEMPLATE_ADMIN": _MAIL_FRAME.format(
        heading="New comment on " + _SITE_LINK,
        said=" wrote:",
        link="View page",
    ),
    "Registration Confirm Mail": "[{name}] Registration Confirm Mail",
    "confirm registration": (
        "Please click <a href='{url}'>{url}</a> to confirm registration, the link "
        "is valid for 1 hour. If you are not registering, please ignore this email."
    ),
}

ZH_CN: dict[str, str] = {
    "Error": "出错了",
    "Upstream Error": "上游服务不可用",
    "Invalid Request": "请求参数错误",
    "Not Found": "内容不存在",
    "Unauthorized": "Unauthorized",
    "FORBIDDEN": "没有权限",
    "USER_NOT_EXIST": "用户不存在",
    "USER_REGISTERED": "用户已注册",
    "TOKEN_EXPIRED": "密钥已过期",
    "TWO_FACTOR_AUTH_ERROR_DETAIL": "二步验证失败",
    "Duplicate Content": "发送的内容之前已经发过",
    "Comment too fast": "评论太快啦，请慢点！",
    "MAIL_SUBJECT_ADMIN": "{site_name} 上有新评论了",
    "MAIL_TEMPLATE_ADMIN": _MAIL_FRAME.format(
        heading="您在"
        + _SITE_LINK
        + "上的文章有了新的评论",
        said="回复说：",
        link="查看回复的完整内容",
    ),
    "Registration Confirm Mail": "【{name}】注册确认邮件",
    "confirm registration": (
        "请点击 <a href='{url}'>{url}</a> 确认注册，链接有效时间为 1 个小时。"
        "如果不是你在注册，请忽略这封邮件。"
    ),
}

ZH_TW: dict[str, str] = {
    "Error": "出錯了",
    "Upstream Error": "上游服務不可用",
    "Invalid Request": "請求參數錯誤",
    "Not Found": "內容不存在",
    "Unauthorized": "Unauthorized",
    "FORBIDDEN": "沒有權限",
    "USER_NOT_EXIST": "用戶不存在",
    "USER_REGISTERED": "用戶已註冊",
    "TOKEN_EXPIRED": "密鑰已過期",
    "TWO_FACTOR_AUTH_ERROR_DETAIL": "二步驗證失敗",
    "Duplicate Content": "發送的內容之前已經發過",
    "Comment too fast": "評論太快啦，請慢點！",
    "MAIL_SUBJECT_ADMIN": "{site_name} 上有新評論了",
    "MAIL_TEMPLATE_ADMIN": _MAIL_FRAME.format(
        heading="您在"
        + _SITE_LINK
        + "上的文章有新評論了",
        said="回復說：",
        link="查看回復的完整內容",
    ),
    "Registration Confirm Mail": "『{name}』註冊確認郵件",
    "confirm registration": (
        "請點擊 <a href='{url}'>{url}</a> 確認註冊，鏈接有效時間為 1 個小時。"
        "如果不是你在註冊，請忽略這封郵件。"
    ),
}

_CATALOGS: dict[str, dict[str, str]] = {
    "en": EN,
    "en-us": EN,
    "zh": ZH_CN,
    "zh-cn": ZH_CN,
    "zh-tw": ZH_TW,
}


def translate(lang: str | None, key: str) -> str:
    """Look up ``key`` in the catalog for ``lang`` (English by default)."""
    catalog = _CATALOGS.get((lang or "en").lower(), EN)
    return catalog.get(key, key)


def render(lang: str | None, key: str, **values: str) -> str:
    """Translate ``key`` and fill its placeholders."""
    return translate(lang, key).format(**values)
