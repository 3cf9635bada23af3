# /app/services/prompt_library.py

"""
This file is the central, version-controlled library for the master prompts
sent to the code generation model. Prompts are treated as code and kept here
rather than inlined in the services that use them.
"""

CODE_GENERATION_PROMPT = """You are a code generation assistant. Generate clean, well-commented code in {language}. Return ONLY the code without any markdown formatting, explanations, or additional text. Just the raw code.

User request: {prompt}"""
