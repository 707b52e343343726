"""
Random Wikipedia article backend.

GET /apiv1 returns {title, summary} of a random article:
- without `top` -> Wikipedia itself picks a random page (page/random/summary)
- with `top=N` -> random pick among the N most viewed articles of the previous month
  (Wikimedia pageviews top list, filtered and cached per lang/month)

Entry point:
- main.py (FastAPI app, `run()` starts uvicorn)
"""
