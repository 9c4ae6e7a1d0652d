import sys

from ai_news_digest.delivery.digest_job import main

sys.exit(main())
