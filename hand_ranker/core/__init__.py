"""
Core Module - 纯领域逻辑层

手牌解析、牌型评估和手牌比较. 核心模块不依赖应用层.

Modules:
    deck: 扑克牌、花色和点数
    parse: 手牌字符串解析
    eval: 牌型评估和手牌比较
    exceptions: 手牌异常
"""
