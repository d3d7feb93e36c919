"""Search adapter layer — connectors for remote search/completion APIs.

Built-in adapters:
  - perplexity: Perplexity chat-completions API (web search with citations)
"""
