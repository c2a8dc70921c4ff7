"""
hand_ranker测试包
"""
