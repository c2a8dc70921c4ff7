"""
集成测试
"""
