"""Estate Listings - seller submissions, admin review and buyer interest"""
