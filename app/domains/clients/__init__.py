# app/domains/clients/__init__.py

"""
'clients' 도메인 패키지입니다.
시료를 의뢰하는 고객(이메일 기준 식별)을 관리합니다.
"""
