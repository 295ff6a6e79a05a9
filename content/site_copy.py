HERO = {
  "title": "STOP WASTING TIME",
  "subtitle": (
    "Most people aren't ready to learn coding. Not because they lack intelligence, but because they haven't "
    "confronted the reality of what it actually requires."
  ),
  "stat_title": "3 MINUTES",
  "stat_desc": (
    "That's all it takes to find out if you're approaching this the right way, or setting yourself up for frustration."
  ),
}

MARQUEE = ["Logic", "Structure", "Clarity", "Mindset", "Discipline", "Architecture"]

TRUTHS = [
  "Coding bootcamps won't tell you this: most beginners fail not because the material is too hard, "
  "but because they never developed the right mindset.",
  "They chase syntax and frameworks without understanding that technology is fundamentally about structured "
  "thinking and problem decomposition.",
  "The industry needs people who can think systematically, not just memorize code patterns. "
  "This assessment reveals which category you fall into.",
]

WHAT_IT_IS = [
  "A diagnostic tool that evaluates your readiness based on mindset, not prior knowledge.",
  "An honest filter that saves you months of frustration by revealing whether you're approaching this correctly.",
  "A reality check that prioritizes clarity over motivation, substance over hype.",
]

WHAT_IT_ISNT = [
  "Not a course. Not a tutorial. Not a motivational speech disguised as education.",
  "Not designed to make you feel good. Designed to make you think clearly.",
  "Not for everyone. And that's exactly the point.",
]

NEXT_STEPS = [
  {
    "title": "REFLECT",
    "text": "Take time to honestly assess whether the results align with your self-perception. "
            "Denial is the enemy of growth.",
  },
  {
    "title": "ACT",
    "text": "Follow the recommended path. Ignore it at your own risk. The assessment is only valuable if you use it.",
  },
]
