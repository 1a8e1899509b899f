"""
Instaparser SDK Example

Parses an article, generates a summary (plain and streamed) and parses a
PDF from a URL and from a local file.
"""

import os
import sys

from instaparser import ErrorKind, InstaparserClient, InstaparserError

ARTICLE_URL = "https://blog.instapaper.com/post/802011928668094464/ai-voices-text-to-speech-redesign-and-android"
PDF_URL = "https://bitcoin.org/bitcoin.pdf"


def main():
    with InstaparserClient(api_key=os.getenv("INSTAPARSER_API_KEY", "your-api-key")) as client:
        print("Example 1: Parsing article from URL")
        article = client.article(ARTICLE_URL)
        print(f"Title: {article.title}")
        print(f"Body length: {len(article.body or '')}")
        print(f"Words: {article.words}")

        print("\nExample 2: Parsing article as text")
        text_article = client.article(ARTICLE_URL, output="text")
        print(f"Text preview: {(text_article.text or '')[:100]}")

        print("\nExample 3: Generating summary")
        summary = client.summary(ARTICLE_URL)
        print(f"Overview: {summary.overview}")
        print(f"Key sentences: {len(summary.key_sentences)}")

        print("\nExample 4: Generating summary with streaming")
        streamed = client.summary(
            ARTICLE_URL,
            stream_callback=lambda line: sys.stdout.write(line + "\n"),
        )
        print(f"\nFinal overview: {streamed.overview}")

        print("\nExample 5: Parsing PDF from URL")
        pdf = client.pdf(PDF_URL)
        print(f"PDF title: {pdf.title}")
        print(f"PDF words: {pdf.words}")

        print("\nExample 6: Parsing PDF from file")
        if os.path.exists("document.pdf"):
            with open("document.pdf", "rb") as f:
                pdf_from_file = client.pdf(file=f)
            print(f"PDF title: {pdf_from_file.title}")
        else:
            print("document.pdf not found, skipping file upload example")


if __name__ == "__main__":
    try:
        main()
    except InstaparserError as e:
        if e.kind is ErrorKind.AUTHENTICATION:
            print(f"Authentication error: {e.message}")
        elif e.kind is ErrorKind.RATE_LIMIT:
            print(f"Rate limit error: {e.message}")
        elif e.kind is ErrorKind.VALIDATION:
            print(f"Validation error: {e.message}")
        else:
            print(f"API error: {e.message} (status: {e.status_code})")
