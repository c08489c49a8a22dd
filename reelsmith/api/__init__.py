"""HTTP API for video generation"""
