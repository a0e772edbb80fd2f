"""
cli - azct 명령줄 인터페이스 (Click, Rich, questionary)
"""
