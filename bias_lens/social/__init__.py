from bias_lens.social.social_reactions import SocialReactionGenerator, title_sentiment

__all__ = ["SocialReactionGenerator", "title_sentiment"]
