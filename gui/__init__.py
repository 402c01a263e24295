"""gui — 本地化演示界面"""
