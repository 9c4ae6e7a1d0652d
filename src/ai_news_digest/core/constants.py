from __future__ import annotations

# ==========================================
# 主題相關性：只看標題
# ==========================================

RELEVANCE_KEYWORDS_LATIN = [  # 英文關鍵字，需為完整詞（前後不可接英數字）
    "ai", "genai", "llm", "llms", "agi",
    "artificial intelligence", "large language model", "large language models",
    "generative", "machine learning", "deep learning",
    "openai", "chatgpt", "gpt", "gemini", "anthropic", "claude", "copilot",
    "google", "microsoft", "meta", "nvidia", "deepmind",
]

RELEVANCE_KEYWORDS_CJK = [  # 中文關鍵字，中文沒有空白斷詞，整詞出現即可
    "人工智慧", "人工智能", "生成式", "大語言模型", "大型語言模型", "語言模型",
    "機器學習", "深度學習", "微軟", "輝達", "谷歌", "聊天機器人",
]

# ==========================================
# URL 品質把關
# ==========================================

BAD_URL_HOSTS = {  # 搜尋引擎首頁與文件示範網域，不論路徑一律拒絕
    "google.com", "www.google.com", "news.google.com",
    "bing.com", "www.bing.com",
    "duckduckgo.com", "www.duckduckgo.com",
    "search.yahoo.com",
    "example.com", "www.example.com",
    "example.org", "www.example.org",
    "example.net", "www.example.net",
}

ARTICLE_PATH_PATTERNS = [  # 「像單篇文章」的路徑形狀，符合任一即可
    r"/\d{4}/\d{2}/\d{2}/",  # /2024/05/10/
]

ARTICLE_SEGMENT_PATTERNS = [  # 以單一路徑片段判斷
    r"\d+",  # CMS 文章編號
    r"[a-z0-9-]{11,}",  # slug
]

# ==========================================
# 摘要輸出格式
# ==========================================

CANDIDATE_LINE_TEMPLATE = "{index}. {title}\n來源：{link}"

DIGEST_TOPIC_TAG_EXAMPLES = ["大型模型", "AI法規", "晶片", "產品更新", "投融資", "安全治理"]

FALLBACK_NOTICE = "（目前無法取得近24小時 AI 新聞，請稍後再試）"

LINE_TEXT_MAX_CHARS = 5000
