"""Customer support inbox for the DanTV product line."""

from models.source_items import CustomerEmail, Sentiment


PRODUCT_MODELS: tuple[str, ...] = (
    "TV-Model 1",
    "TV-Model 2",
    "TV-Model 3",
    "TV-Model 4",
)


CUSTOMER_EMAILS: tuple[CustomerEmail, ...] = (
    CustomerEmail(
        id="email-1",
        customer_name="Freja Madsen",
        subject="Screen went black after two weeks",
        body=(
            "Hi, my TV-Model 2 suddenly shows a black screen while the sound keeps "
            "playing. I have unplugged it twice and tried another HDMI source. It is "
            "only two weeks old and I need it working before the weekend. What are "
            "my options?"
        ),
        product_model="TV-Model 2",
        priority="high",
        sentiment=Sentiment.NEGATIVE,
    ),
    CustomerEmail(
        id="email-2",
        customer_name="Oliver Berg",
        subject="Question about wall mount size",
        body=(
            "Hello, which VESA pattern does the TV-Model 1 use? I want to order a "
            "wall mount this week and make sure the screws fit."
        ),
        product_model="TV-Model 1",
        priority="low",
        sentiment=Sentiment.NEUTRAL,
    ),
    CustomerEmail(
        id="email-3",
        customer_name="Ida Lund",
        subject="Thank you for the quick replacement",
        body=(
            "I just wanted to say thanks. The replacement TV-Model 3 arrived a day "
            "early and the picture is fantastic. The technician was friendly and "
            "took the old set away."
        ),
        product_model="TV-Model 3",
        priority="low",
        sentiment=Sentiment.POSITIVE,
        answered=True,
    ),
    CustomerEmail(
        id="email-4",
        customer_name="Mikkel Sorensen",
        subject="Refund still not received",
        body=(
            "I returned my TV-Model 4 three weeks ago and I still have not received "
            "my refund. Your chat said 5 business days. I have the return receipt. "
            "This is getting really frustrating."
        ),
        product_model="TV-Model 4",
        priority="high",
        sentiment=Sentiment.NEGATIVE,
    ),
    CustomerEmail(
        id="email-5",
        customer_name="Clara Holm",
        subject="Streaming apps keep logging me out",
        body=(
            "Every morning I have to log in again to my streaming apps on the "
            "TV-Model 1. Is there a setting that keeps me signed in?"
        ),
        product_model="TV-Model 1",
        priority="medium",
        sentiment=Sentiment.NEUTRAL,
    ),
    CustomerEmail(
        id="email-6",
        customer_name="Emil Kjaer",
        subject="Loving the game mode",
        body=(
            "The game mode on my TV-Model 2 is brilliant, zero noticeable lag with my "
            "console. Do you have any recommended picture settings for HDR gaming?"
        ),
        product_model="TV-Model 2",
        priority="low",
        sentiment=Sentiment.POSITIVE,
    ),
    CustomerEmail(
        id="email-7",
        customer_name="Sofie Winther",
        subject="Firmware update bricked my TV",
        body=(
            "After last night's firmware update my TV-Model 3 is stuck on the logo "
            "screen. Nothing I press on the remote does anything. I work from home "
            "and use it as a second monitor, so I need a fix fast."
        ),
        product_model="TV-Model 3",
        priority="high",
        sentiment=Sentiment.NEGATIVE,
    ),
    CustomerEmail(
        id="email-8",
        customer_name="Lucas Dahl",
        subject="Extended warranty options",
        body=(
            "Could you tell me what extended warranty options exist for the "
            "TV-Model 4 and whether they cover panel defects?"
        ),
        product_model="TV-Model 4",
        priority="medium",
        sentiment=Sentiment.NEUTRAL,
    ),
    CustomerEmail(
        id="email-9",
        customer_name="Alma Friis",
        subject="Remote buttons sticking",
        body=(
            "Several buttons on the TV-Model 1 remote have started sticking. The TV "
            "is great otherwise, but it is annoying to press volume three times. Can "
            "I get a replacement remote?"
        ),
        product_model="TV-Model 1",
        priority="medium",
        sentiment=Sentiment.NEGATIVE,
    ),
    CustomerEmail(
        id="email-10",
        customer_name="Noah Vestergaard",
        subject="Great setup experience",
        body=(
            "Setting up the TV-Model 3 took less than ten minutes. The on-screen "
            "guide was clear. Just wondering if there is a way to rename the HDMI "
            "inputs?"
        ),
        product_model="TV-Model 3",
        priority="low",
        sentiment=Sentiment.POSITIVE,
    ),
)
