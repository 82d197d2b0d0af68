"""Post composer: client-side core of the post creation form."""
