"""bias_lens - 뉴스 기사 편향 분석"""

__version__ = "0.1.0"
