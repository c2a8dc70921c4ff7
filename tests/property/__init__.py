"""
Property-based Tests - 属性测试

该目录包含基于hypothesis的性质测试，验证牌型识别和牌力比较的不变量。
"""
