"""GoF design pattern catalog service"""
