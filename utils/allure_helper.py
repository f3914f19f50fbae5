"""
Allure 報告整合輔助
封裝 activity 步驟與失敗附件，讓 Allure 報告中的步驟樹與 ActivityTrace 一致。
不在 allure-pytest 執行環境時，allure.step 本身就是 no-op，不影響測試。
"""

import allure


def step_scope(title: str):
    """
    回傳 Allure step context manager，供 ActivityTrace 包住每個 activity。

    用法：
        with step_scope("🔹 - LoginScreen - Tap the Login button"):
            button.click()
    """
    return allure.step(title)


def attach_text(text: str, name: str = "log") -> None:
    """將文字附加到 Allure 報告"""
    allure.attach(text, name=name, attachment_type=allure.attachment_type.TEXT)
