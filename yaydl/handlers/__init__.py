"""Site handlers for YouTube (via Invidious), Vimeo, VOE, WatchMDH and xHamster."""