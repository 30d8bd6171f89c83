"""
Deployment Scripts
Run from the project root, e.g. python -m scripts.deploy_bachi_token
"""
