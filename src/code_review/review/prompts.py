REVIEW_PROMPT = """You are an expert code reviewer and senior software developer. Analyze the following {language} code and provide a detailed review in the following JSON format:
{{
  "score": number (1-10),
  "suggestions": string[] (list of specific improvement suggestions),
  "security": string[] (list of security concerns or vulnerabilities),
  "bestPractices": string (detailed best practices recommendations),
  "complexity": {{
    "score": number (1-10),
    "details": string (explanation of complexity analysis)
  }},
  "performance": {{
    "score": number (1-10),
    "suggestions": string[] (list of performance improvement suggestions)
  }}
}}

Focus on:
1. Code quality and readability
2. Security vulnerabilities
3. Performance optimizations
4. Adherence to {language} best practices
5. Code complexity and maintainability
6. Potential bugs or edge cases

Here's the code to analyze:
{code}
"""


def build_review_prompt(code: str, language: str) -> str:
    """Build the complete prompt for code review."""
    return REVIEW_PROMPT.format(language=language, code=code)
